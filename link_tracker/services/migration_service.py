"""Copy the open bookmarks and labels of one repository into another.

Used once when bookmark data moves out of a code repository into a dedicated
data repository. Individual failures are logged and skipped so one bad issue
does not abort the whole run.
"""
import logging
import time
from typing import Callable, List, Dict, Any

from ..errors import ApiError, LinkTrackerError
from .github_client import GitHubClient

logger = logging.getLogger(__name__)

CREATE_DELAY_SECONDS = 0.1


class MigrationResult:
    def __init__(self):
        self.labels_created = 0
        self.labels_skipped = 0
        self.issues_created = 0
        self.issues_closed = 0
        self.failures: List[str] = []

    def to_dict(self) -> Dict[str, Any]:
        return {
            'labels_created': self.labels_created,
            'labels_skipped': self.labels_skipped,
            'issues_created': self.issues_created,
            'issues_closed': self.issues_closed,
            'failures': list(self.failures),
        }


class MigrationService:
    def __init__(self, source: GitHubClient, target: GitHubClient, sleep: Callable[[float], None] = time.sleep):
        self.source = source
        self.target = target
        self.sleep = sleep

    def migrate(self, close_source: bool = False) -> MigrationResult:
        result = MigrationResult()
        logger.info(f"Source: {self.source.owner}/{self.source.repo}")
        logger.info(f"Target: {self.target.owner}/{self.target.repo}")

        issues = self.source.list_open_issues()
        logger.info(f"Found {len(issues)} open issues")
        labels = self.source.list_labels()
        logger.info(f"Found {len(labels)} labels")

        if not issues and not labels:
            logger.info("No data to migrate")
            return result

        self._create_labels(labels, result)
        migrated = self._create_issues(issues, result)
        if close_source:
            self._close_source_issues(migrated, result)
        return result

    def _create_labels(self, labels: List[Dict[str, Any]], result: MigrationResult):
        for label in labels:
            try:
                self.target.create_label(label['name'], label['color'], label.get('description') or '')
                result.labels_created += 1
                logger.info(f"Created label: {label['name']}")
            except ApiError as e:
                if e.is_validation_failed and 'already_exists' in e.text:
                    result.labels_skipped += 1
                    logger.warning(f"Label '{label['name']}' already exists in target repo")
                else:
                    result.failures.append(f"label {label['name']}: {e.message}")
                    logger.error(f"Failed to create label '{label['name']}': {e.message}")
            except LinkTrackerError as e:
                result.failures.append(f"label {label['name']}: {e.message}")
                logger.error(f"Failed to create label '{label['name']}': {e.message}")

    def _create_issues(self, issues: List[Dict[str, Any]], result: MigrationResult) -> List[Dict[str, Any]]:
        migrated = []
        for issue in issues:
            payload = {
                'title': issue['title'],
                'body': issue.get('body') or '',
                'labels': [label['name'] for label in issue.get('labels') or []],
            }
            try:
                created = self.target.create_issue(payload)
            except LinkTrackerError as e:
                result.failures.append(f"issue {issue['title']}: {e.message}")
                logger.error(f"Failed to create issue '{issue['title']}': {e.message}")
                continue
            migrated.append(issue)
            result.issues_created += 1
            logger.info(f"Created issue: {issue['title']} (ID: {created['number']})")
            self.sleep(CREATE_DELAY_SECONDS)
        return migrated

    def _close_source_issues(self, issues: List[Dict[str, Any]], result: MigrationResult):
        for issue in issues:
            try:
                self.source.close_issue(issue['number'])
                result.issues_closed += 1
                logger.info(f"Closed issue: {issue['title']}")
            except LinkTrackerError as e:
                result.failures.append(f"close {issue['number']}: {e.message}")
                logger.error(f"Failed to close issue '{issue['title']}': {e.message}")
