"""
Data Models

Core data models of the PR labeler
"""

from .pr_files import ChangedFile, FileStatus, PullRequestSnapshot
from .labels import Label, ReconciliationPlan
from .outcome import Applied, RunOutcome, Skipped
from .event import PullRequestEvent

__all__ = [
    "ChangedFile",
    "FileStatus",
    "PullRequestSnapshot",
    "Label",
    "ReconciliationPlan",
    "Applied",
    "RunOutcome",
    "Skipped",
    "PullRequestEvent",
]
