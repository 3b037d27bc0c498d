import json
import logging
from typing import Any, Dict, List, Optional

import requests

from ..errors import ApiError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_GITHUB_API = 'https://api.github.com'
PER_PAGE = 100


class GitHubClient:
    """Single-shot JSON requests against one repository's REST endpoints.

    Every call is attempted exactly once. Non-2xx statuses raise ``ApiError``;
    network failures and unparseable bodies raise ``TransportError``.
    """

    def __init__(self, token: str, owner: str, repo: str, api_base: str = DEFAULT_GITHUB_API,
                 timeout: float = 30, session: Optional[requests.Session] = None):
        self.token = token
        self.owner = owner
        self.repo = repo
        self.api_base = api_base.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def repo_path(self) -> str:
        return f"/repos/{self.owner}/{self.repo}"

    def request(self, endpoint: str, method: str = 'GET', body: Optional[Dict[str, Any]] = None,
                params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.api_base}{endpoint}"
        headers = {
            'Authorization': f'Bearer {self.token}',
            'Accept': 'application/vnd.github.v3+json',
        }
        data = None
        if body is not None:
            headers['Content-Type'] = 'application/json'
            data = json.dumps(body)

        logger.debug(f"REQUEST: {method} {url} params={params}")
        if data is not None:
            logger.debug(f"BODY: {data}")

        try:
            response = self.session.request(method, url, headers=headers, data=data, params=params,
                                            timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Transport failure: {method} {url}: {str(e)}")
            raise TransportError(f"GitHub request failed: {str(e)}") from e

        if not 200 <= response.status_code < 300:
            logger.error(f"ERROR: {response.status_code} {url} RESPONSE: {response.text}")
            raise ApiError(response.status_code, response.text)

        logger.debug(f"RESPONSE: {response.status_code} {url}")
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"GitHub returned invalid JSON for {url}") from e

    def paginate(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """Collect every page, stopping at the first page shorter than PER_PAGE."""
        items = []
        page = 1
        while True:
            page_params = dict(params or {}, per_page=PER_PAGE, page=page)
            batch = self.request(endpoint, params=page_params)
            items.extend(batch)
            if len(batch) < PER_PAGE:
                return items
            page += 1

    def get_repository(self) -> Dict[str, Any]:
        return self.request(self.repo_path)

    def list_open_issues(self) -> List[Dict[str, Any]]:
        # the issues endpoint also returns pull requests
        issues = self.paginate(f"{self.repo_path}/issues", params={'state': 'open'})
        return [issue for issue in issues if 'pull_request' not in issue]

    def create_issue(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self.request(f"{self.repo_path}/issues", method='POST', body=payload)

    def update_issue(self, number: int, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self.request(f"{self.repo_path}/issues/{number}", method='PATCH', body=payload)

    def close_issue(self, number: int) -> Dict[str, Any]:
        return self.update_issue(number, {'state': 'closed'})

    def list_labels(self) -> List[Dict[str, Any]]:
        return self.paginate(f"{self.repo_path}/labels")

    def create_label(self, name: str, color: str, description: Optional[str] = None) -> Dict[str, Any]:
        payload = {'name': name, 'color': color}
        if description is not None:
            payload['description'] = description
        return self.request(f"{self.repo_path}/labels", method='POST', body=payload)
