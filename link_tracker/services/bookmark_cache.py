"""Read-through cache of the open bookmarks in the backing repository.

The cache answers from memory while its snapshot is non-empty and younger than
the TTL. Otherwise it refetches every open issue. A failed refetch keeps the
previous snapshot and is only logged, unless there is no snapshot to fall
back to.
"""
import logging
import threading
import time
from typing import Callable, List, Optional

from ..errors import LinkTrackerError
from ..models.bookmark import Bookmark
from .github_client import GitHubClient
from .issue_mapper import issue_to_bookmark

logger = logging.getLogger(__name__)

DEFAULT_TTL = 8 * 60 * 60


class BookmarkCache:
    def __init__(self, client: GitHubClient, ttl: float = DEFAULT_TTL, clock: Callable[[], float] = time.time):
        self.client = client
        self.ttl = ttl
        self.clock = clock
        self.items: List[Bookmark] = []
        self.last_refresh_at: float = 0
        self._lock = threading.RLock()

    def is_fresh(self) -> bool:
        return bool(self.items) and (self.clock() - self.last_refresh_at) < self.ttl

    def get_all(self, force_refresh: bool = False) -> List[Bookmark]:
        with self._lock:
            if not force_refresh and self.is_fresh():
                return self.items

            now = self.clock()
            try:
                logger.info("Fetching issues from GitHub...")
                issues = self.client.list_open_issues()
            except LinkTrackerError as e:
                if not self.items:
                    raise
                logger.warning(f"Error fetching issues, serving {len(self.items)} cached bookmarks: {e.message}")
                return self.items

            self.items = [issue_to_bookmark(issue) for issue in issues]
            self.last_refresh_at = now
            logger.info(f"Fetched {len(self.items)} issues")
            return self.items

    def insert(self, bookmark: Bookmark):
        with self._lock:
            self.items = [bookmark] + self.items

    def replace(self, bookmark_id: int, bookmark: Bookmark):
        with self._lock:
            for index, item in enumerate(self.items):
                if item.id == bookmark_id:
                    self.items[index] = bookmark
                    return

    def remove(self, bookmark_id: int):
        with self._lock:
            self.items = [item for item in self.items if item.id != bookmark_id]

    @property
    def last_refresh(self) -> Optional[float]:
        return self.last_refresh_at or None
