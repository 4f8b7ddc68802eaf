"""
Run Outcome Models

Result of one PR evaluation
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional, Union

from .pr_files import PullRequestSnapshot


@dataclass(frozen=True)
class Skipped:
    """The PR was not evaluated"""
    reason: str
    pr_number: Optional[int] = None

    status = "skipped"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "pr_number": self.pr_number,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class Applied:
    """The PR was evaluated and its labels reconciled"""
    pr_number: int
    added: FrozenSet[str] = frozenset()
    removed: FrozenSet[str] = frozenset()
    dry_run: bool = False
    snapshot: Optional[PullRequestSnapshot] = field(default=None, compare=False, repr=False)

    status = "applied"

    @property
    def changed(self) -> bool:
        return bool(self.added or self.removed)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "pr_number": self.pr_number,
            "added": sorted(self.added),
            "removed": sorted(self.removed),
            "dry_run": self.dry_run,
        }


RunOutcome = Union[Skipped, Applied]
