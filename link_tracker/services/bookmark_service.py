import logging
from typing import List, Dict, Any, Optional

from ..errors import ValidationError
from ..models.bookmark import Bookmark, Tag
from .bookmark_cache import BookmarkCache
from .color_service import ColorService, color_service
from .github_client import GitHubClient
from .issue_mapper import bookmark_to_issue_payload, issue_to_bookmark, label_to_tag

logger = logging.getLogger(__name__)


class BookmarkService:
    def __init__(self, client: GitHubClient, cache: BookmarkCache, colors: ColorService = color_service):
        self.client = client
        self.cache = cache
        self.colors = colors

    def list_bookmarks(self, force_refresh: bool = False, query: Optional[str] = None,
                       tag: Optional[str] = None) -> List[Bookmark]:
        bookmarks = self.cache.get_all(force_refresh)
        if query:
            bookmarks = [b for b in bookmarks if b.matches(query)]
        if tag:
            bookmarks = [b for b in bookmarks if tag in b.tags]
        return bookmarks

    def refresh(self) -> Dict[str, Any]:
        bookmarks = self.cache.get_all(force_refresh=True)
        return {"message": "Bookmarks refreshed", "count": len(bookmarks)}

    def create_bookmark(self, data: Dict[str, Any]) -> Bookmark:
        payload = self._issue_payload(data)
        issue = self.client.create_issue(payload)
        bookmark = issue_to_bookmark(issue)
        self.cache.insert(bookmark)
        logger.info(f"Created bookmark {bookmark.id}: {bookmark.title}")
        return bookmark

    def update_bookmark(self, bookmark_id: int, data: Dict[str, Any]) -> Bookmark:
        payload = self._issue_payload(data)
        issue = self.client.update_issue(bookmark_id, payload)
        bookmark = issue_to_bookmark(issue)
        self.cache.replace(bookmark_id, bookmark)
        logger.info(f"Updated bookmark {bookmark_id}")
        return bookmark

    def delete_bookmark(self, bookmark_id: int) -> Dict[str, str]:
        self.client.close_issue(bookmark_id)
        self.cache.remove(bookmark_id)
        logger.info(f"Closed bookmark {bookmark_id}")
        return {"message": "Bookmark deleted"}

    def list_labels(self) -> List[Tag]:
        return [label_to_tag(label) for label in self.client.list_labels()]

    def create_label(self, data: Dict[str, Any]) -> Tag:
        data = data if isinstance(data, dict) else {}
        name = data.get('name')
        if not name or not isinstance(name, str):
            raise ValidationError('Label name is required')
        color = data.get('color') or self.colors.random_hex()
        if not isinstance(color, str):
            raise ValidationError('Label color must be a string')
        label = self.client.create_label(name, color.lstrip('#'))
        return label_to_tag(label)

    @staticmethod
    def _issue_payload(data: Dict[str, Any]) -> Dict[str, Any]:
        # a JSON body that is not an object carries no fields
        data = data if isinstance(data, dict) else {}
        title = data.get('title')
        link = data.get('link')
        if not title or not link or not isinstance(title, str) or not isinstance(link, str):
            raise ValidationError('Title and link are required')
        description = data.get('description')
        if description is not None and not isinstance(description, str):
            raise ValidationError('Description must be a string')
        tags = data.get('tags')
        if tags is not None and not (isinstance(tags, list) and all(isinstance(tag, str) for tag in tags)):
            raise ValidationError('Tags must be a list of strings')
        return bookmark_to_issue_payload(title, link, description, tags)
