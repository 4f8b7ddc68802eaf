"""
PR File Data Models

Changed files and the per-run pull request snapshot
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional, Tuple


class FileStatus(str, Enum):
    """Status of a file touched by a PR revision"""
    ADDED = "added"
    MODIFIED = "modified"
    REMOVED = "removed"
    RENAMED = "renamed"


@dataclass(frozen=True)
class ChangedFile:
    """A single file changed in a pull request"""
    filename: str
    status: FileStatus
    previous_filename: Optional[str] = None

    def __post_init__(self):
        """Data validation"""
        if not self.filename:
            raise ValueError("filename cannot be empty")
        if not isinstance(self.status, FileStatus):
            # frozen, so go through object.__setattr__
            object.__setattr__(self, "status", FileStatus(self.status))
        if self.status is FileStatus.RENAMED and not self.previous_filename:
            raise ValueError(f"Renamed file {self.filename} requires previous_filename")
        if self.status is not FileStatus.RENAMED and self.previous_filename is not None:
            raise ValueError(
                f"previous_filename is only valid for renamed files, got status {self.status.value}"
            )

    @property
    def paths(self) -> Tuple[str, ...]:
        """Current path first, followed by the pre-rename path if any"""
        if self.previous_filename:
            return (self.filename, self.previous_filename)
        return (self.filename,)


@dataclass(frozen=True)
class PullRequestSnapshot:
    """Everything the labeler knows about a PR for one evaluation"""
    number: int
    is_draft: bool
    changed_files: Tuple[ChangedFile, ...] = ()
    current_labels: FrozenSet[str] = frozenset()
    requested_reviewers: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if self.number <= 0:
            raise ValueError("PR number must be positive")

    @property
    def requested_reviewer_count(self) -> int:
        return len(self.requested_reviewers)
