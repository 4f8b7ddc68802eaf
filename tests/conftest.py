"""Shared test fixtures for the PR labeler."""

from typing import Dict, List, Optional

import pytest

from pr_labeler.github.client import GitHubAPIError
from pr_labeler.models.pr_files import ChangedFile


class FakeGateway:
    """In-memory stand-in for PullRequestGateway that records every call."""

    def __init__(
        self,
        files: Optional[List[ChangedFile]] = None,
        labels: Optional[List[str]] = None,
        reviewers: Optional[List[str]] = None,
        draft: bool = False,
    ):
        self.files = list(files or [])
        self.labels = list(labels or [])
        self.reviewers = list(reviewers or [])
        self.draft = draft
        self.calls: List[str] = []
        self.failures: Dict[str, Exception] = {}
        self.removal_failures: Dict[str, Exception] = {}

    def fail(self, operation: str, error: Optional[Exception] = None) -> None:
        self.failures[operation] = error or GitHubAPIError(f"{operation} broke", status_code=500)

    def _record(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.failures:
            raise self.failures[operation]

    def is_draft(self, pr_number: int) -> bool:
        self._record('is_draft')
        return self.draft

    def list_changed_files(self, pr_number: int) -> List[ChangedFile]:
        self._record('list_changed_files')
        return list(self.files)

    def list_current_labels(self, pr_number: int) -> List[str]:
        self._record('list_current_labels')
        return list(self.labels)

    def list_requested_reviewers(self, pr_number: int) -> List[str]:
        self._record('list_requested_reviewers')
        return list(self.reviewers)

    def add_labels(self, pr_number: int, labels: List[str]) -> None:
        self._record('add_labels')
        for label in labels:
            if label not in self.labels:
                self.labels.append(label)

    def remove_label(self, pr_number: int, label: str) -> None:
        self.calls.append(f'remove_label:{label}')
        if label in self.removal_failures:
            raise self.removal_failures[label]
        self.labels.remove(label)


@pytest.fixture
def fake_gateway() -> FakeGateway:
    return FakeGateway(reviewers=['alice'])


@pytest.fixture
def make_gateway():
    """Factory for fake gateways with custom PR state."""
    return FakeGateway
