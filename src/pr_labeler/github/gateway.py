"""
Pull Request Gateway

Binds a GitHubClient to one repository and exposes the operations the
labeler consumes, keyed by PR number only.
"""

import logging
from typing import List

from ..models.pr_files import ChangedFile
from .client import GitHubClient
from .parser import PRFileParser


logger = logging.getLogger(__name__)


class PullRequestGateway:
    """GitHub-backed collaborator for PR queries and label mutations."""

    def __init__(self, client: GitHubClient, repository: str, parser: PRFileParser = None):
        """
        Args:
            client: Authenticated GitHub client
            repository: Repository in ``owner/repo`` form
            parser: Response parser (default: PRFileParser)
        """
        if repository.count('/') != 1 or not all(repository.split('/')):
            raise ValueError(f"Repository must be in format 'owner/repo', got '{repository}'")

        self.client = client
        self.repository = repository
        self.owner, self.repo = repository.split('/')
        self.parser = parser or PRFileParser()

    def is_draft(self, pr_number: int) -> bool:
        pr_data = self.client.get_pull_request(self.owner, self.repo, pr_number)
        return bool(pr_data.get('draft', False))

    def list_changed_files(self, pr_number: int) -> List[ChangedFile]:
        files_data = self.client.get_pull_request_files(self.owner, self.repo, pr_number)
        return self.parser.parse_changed_files(files_data)

    def list_current_labels(self, pr_number: int) -> List[str]:
        labels_data = self.client.get_issue_labels(self.owner, self.repo, pr_number)
        return self.parser.parse_label_names(labels_data)

    def list_requested_reviewers(self, pr_number: int) -> List[str]:
        reviewers_data = self.client.get_requested_reviewers(self.owner, self.repo, pr_number)
        return self.parser.parse_requested_reviewers(reviewers_data)

    def add_labels(self, pr_number: int, labels: List[str]) -> None:
        self.client.add_labels(self.owner, self.repo, pr_number, labels)

    def remove_label(self, pr_number: int, label: str) -> None:
        self.client.remove_label(self.owner, self.repo, pr_number, label)
