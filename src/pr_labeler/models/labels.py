"""
Label Data Models

The fixed label vocabulary and the add/remove plan derived from it
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, Set, Union


class Label(str, Enum):
    """Labels the bot knows about. Values are the GitHub label names."""
    NEW_COMMAND = "new command"
    PAGE_EDIT = "page edit"
    NEW_TRANSLATION = "new translation"
    TRANSLATION_EDIT = "translation edit"
    COMMUNITY = "community"
    DOCUMENTATION = "documentation"
    TOOLING = "tooling"
    MASS_CHANGES = "mass changes"
    REVIEW_NEEDED = "review needed"
    # applied by maintainers, only ever removed by the bot
    WAITING = "waiting"

    def __str__(self) -> str:
        return self.value


LabelLike = Union[Label, str]


def label_name(label: LabelLike) -> str:
    """Plain GitHub name of a label, whether given as enum member or string"""
    if isinstance(label, Label):
        return label.value
    return label


def label_names(labels: Iterable[LabelLike]) -> FrozenSet[str]:
    """Deduplicated GitHub names for a collection of labels"""
    return frozenset(label_name(label) for label in labels)


@dataclass(frozen=True)
class ReconciliationPlan:
    """Labels to add to and remove from a PR"""
    to_add: FrozenSet[str] = frozenset()
    to_remove: FrozenSet[str] = frozenset()

    def __post_init__(self):
        overlap = self.to_add & self.to_remove
        if overlap:
            raise ValueError(f"Labels cannot be both added and removed: {sorted(overlap)}")

    @property
    def is_empty(self) -> bool:
        return not self.to_add and not self.to_remove

    def apply_to(self, current: Iterable[LabelLike]) -> Set[str]:
        """Label set the PR ends up with once this plan has been applied"""
        return (set(label_names(current)) | self.to_add) - self.to_remove
