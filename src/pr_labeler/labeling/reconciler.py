"""
Label Reconciler

Computes which labels to add to and remove from a PR, and applies the
resulting plan through the GitHub gateway.
"""

import logging
from typing import FrozenSet, Iterable, List, Tuple

from ..exceptions import UpstreamMutationFailure
from ..github.client import GitHubAPIError
from ..models.labels import Label, LabelLike, ReconciliationPlan, label_names


logger = logging.getLogger(__name__)


# Labels owned by maintainers are never removed, except these markers.
REMOVABLE_LABELS: FrozenSet[str] = frozenset({Label.WAITING.value})


def reconcile(desired: Iterable[LabelLike], current: Iterable[LabelLike]) -> ReconciliationPlan:
    """
    Diff the desired label set against the PR's current labels.

    Args:
        desired: Labels the PR should carry
        current: Labels the PR carries now

    Returns:
        Plan adding every missing desired label and removing stale markers
    """
    desired_names = label_names(desired)
    current_names = label_names(current)

    to_add = desired_names - current_names
    to_remove = (current_names - desired_names) & REMOVABLE_LABELS
    return ReconciliationPlan(to_add=frozenset(to_add), to_remove=frozenset(to_remove))


def apply_plan(gateway, pr_number: int, plan: ReconciliationPlan) -> None:
    """
    Apply a plan: one batched add, then one removal call per label.

    Every mutation is attempted even if an earlier one fails; failures are
    raised together afterwards. Nothing is rolled back.

    Raises:
        UpstreamMutationFailure: If any add or remove call failed
    """
    failures: List[Tuple[str, Exception]] = []

    if plan.to_add:
        labels = sorted(plan.to_add)
        logger.info(f"PR #{pr_number}: adding labels: {', '.join(labels)}")
        try:
            gateway.add_labels(pr_number, labels)
        except (GitHubAPIError, ValueError) as e:
            logger.error(f"PR #{pr_number}: failed to add labels {labels}: {e}")
            failures.append((f"add_labels({', '.join(labels)})", e))

    # removals are independent of each other; no ordering is relied on
    for label in sorted(plan.to_remove):
        logger.info(f"PR #{pr_number}: removing label: {label}")
        try:
            gateway.remove_label(pr_number, label)
        except (GitHubAPIError, ValueError) as e:
            logger.error(f"PR #{pr_number}: failed to remove label {label}: {e}")
            failures.append((f"remove_label({label})", e))

    if failures:
        raise UpstreamMutationFailure(pr_number, failures)
