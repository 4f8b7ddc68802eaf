"""
GitHub API Client

Handles GitHub API authentication, rate limiting, and communication.
Provides the pull request and issue-label calls the labeler needs.
"""

import time
import logging
from typing import Dict, List, Optional
from datetime import datetime
from urllib.parse import quote

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


logger = logging.getLogger(__name__)


class GitHubAPIError(Exception):
    """GitHub API related errors"""
    def __init__(self, message: str, status_code: Optional[int] = None, response_data: Optional[Dict] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data


class RateLimitExceeded(GitHubAPIError):
    """GitHub API rate limit exceeded"""
    def __init__(self, reset_time: datetime):
        super().__init__(f"Rate limit exceeded. Resets at {reset_time}", status_code=429)
        self.reset_time = reset_time


class GitHubClient:
    """
    GitHub API client with authentication, rate limiting, and error handling.

    Provides methods for:
    - Pull request metadata, changed files and requested reviewers
    - Issue label listing, adding and removal
    - API rate limit management
    """

    PER_PAGE = 100

    def __init__(self, token: str, base_url: str = "https://api.github.com", timeout: float = 30):
        """
        Initialize GitHub client.

        Args:
            token: GitHub token (personal access token or Actions token)
            base_url: GitHub API base URL (default: https://api.github.com)
            timeout: Per-request timeout in seconds
        """
        if not token:
            raise ValueError("GitHub token is required")

        self.token = token
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = self._create_session()
        self.rate_limit_remaining = 5000
        self.rate_limit_reset = datetime.now()

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self.session.headers)

    def _create_session(self) -> requests.Session:
        """Create requests session with retry strategy and authentication."""
        session = requests.Session()

        # Configure retry strategy
        retry_strategy = Retry(
            total=3,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        # Set authentication headers
        session.headers.update({
            'Authorization': f'token {self.token}',
            'Accept': 'application/vnd.github.v3+json',
            'User-Agent': 'PR-Labeler/1.0'
        })

        return session

    def _check_rate_limit(self) -> None:
        """Check and handle GitHub API rate limits."""
        if self.rate_limit_remaining <= 10 and datetime.now() < self.rate_limit_reset:
            wait_time = (self.rate_limit_reset - datetime.now()).total_seconds()
            if wait_time > 0:
                logger.warning(f"Rate limit low ({self.rate_limit_remaining}), resets in {wait_time:.1f}s")
                raise RateLimitExceeded(self.rate_limit_reset)

    def _update_rate_limit(self, response: requests.Response) -> None:
        """Update rate limit information from response headers."""
        if 'X-RateLimit-Remaining' in response.headers:
            self.rate_limit_remaining = int(response.headers['X-RateLimit-Remaining'])

        if 'X-RateLimit-Reset' in response.headers:
            reset_timestamp = int(response.headers['X-RateLimit-Reset'])
            self.rate_limit_reset = datetime.fromtimestamp(reset_timestamp)

    def _make_request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """
        Make authenticated request to GitHub API with rate limiting.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint (without base URL)
            **kwargs: Additional arguments for requests

        Returns:
            Response object

        Raises:
            GitHubAPIError: For API errors
            RateLimitExceeded: When rate limit is exceeded
        """
        self._check_rate_limit()

        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        kwargs.setdefault('timeout', self.timeout)

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.error(f"Request failed: {method} {url}: {e}")
            raise GitHubAPIError(f"Request failed: {method} {endpoint}: {e}")

        self._update_rate_limit(response)

        if response.status_code == 429 or (
            response.status_code == 403 and response.headers.get('X-RateLimit-Remaining') == '0'
        ):
            reset_time = datetime.fromtimestamp(int(response.headers.get('X-RateLimit-Reset', time.time() + 3600)))
            raise RateLimitExceeded(reset_time)

        if not response.ok:
            error_data = self._json_or_empty(response)
            raise GitHubAPIError(
                f"GitHub API error: {method} {endpoint}: {response.status_code} - "
                f"{error_data.get('message', 'Unknown error')}",
                status_code=response.status_code,
                response_data=error_data
            )

        return response

    @staticmethod
    def _json_or_empty(response: requests.Response) -> Dict:
        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    def _get_paginated(self, endpoint: str, params: Optional[Dict] = None) -> List[Dict]:
        """
        Fetch all pages of a paginated list endpoint.

        Args:
            endpoint: API endpoint (without base URL)
            params: Extra query parameters

        Returns:
            Items from all pages
        """
        results = []
        page = 1
        params = params or {}

        while True:
            page_params = {**params, 'page': page, 'per_page': self.PER_PAGE}
            logger.debug(f"Fetching page {page} of {endpoint}")
            response = self._make_request('GET', endpoint, params=page_params)

            page_items = response.json()
            if not page_items:
                break

            results.extend(page_items)

            if len(page_items) < self.PER_PAGE:
                break

            page += 1

        return results

    def get_pull_request(self, owner: str, repo: str, pr_number: int) -> Dict:
        """
        Get pull request information.

        Args:
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number

        Returns:
            Pull request data
        """
        logger.info(f"Fetching PR {owner}/{repo}#{pr_number}")

        response = self._make_request('GET', f'/repos/{owner}/{repo}/pulls/{pr_number}')
        return response.json()

    def get_pull_request_files(self, owner: str, repo: str, pr_number: int) -> List[Dict]:
        """
        Get files changed in a pull request.

        Args:
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number

        Returns:
            List of file change data
        """
        logger.info(f"Fetching PR files for {owner}/{repo}#{pr_number}")

        files = self._get_paginated(f'/repos/{owner}/{repo}/pulls/{pr_number}/files')

        logger.info(f"Found {len(files)} changed files")
        return files

    def get_requested_reviewers(self, owner: str, repo: str, pr_number: int) -> Dict:
        """
        Get users and teams requested to review a pull request.

        Returns:
            Dict with ``users`` and ``teams`` lists
        """
        logger.info(f"Fetching requested reviewers for {owner}/{repo}#{pr_number}")

        response = self._make_request('GET', f'/repos/{owner}/{repo}/pulls/{pr_number}/requested_reviewers')
        return response.json()

    def get_issue_labels(self, owner: str, repo: str, issue_number: int) -> List[Dict]:
        """Get labels currently on an issue or pull request."""
        logger.info(f"Fetching labels for {owner}/{repo}#{issue_number}")

        return self._get_paginated(f'/repos/{owner}/{repo}/issues/{issue_number}/labels')

    def add_labels(self, owner: str, repo: str, issue_number: int, labels: List[str]) -> None:
        """Add labels to an issue or pull request in a single call."""
        self._make_request(
            'POST',
            f'/repos/{owner}/{repo}/issues/{issue_number}/labels',
            json={'labels': list(labels)}
        )

    def remove_label(self, owner: str, repo: str, issue_number: int, label: str) -> None:
        """Remove one label from an issue or pull request."""
        self._make_request(
            'DELETE',
            f"/repos/{owner}/{repo}/issues/{issue_number}/labels/{quote(label, safe='')}"
        )
