"""
Pull Request Labeler

Main interface that orchestrates one PR evaluation, from the draft
check to applying the label plan.
"""

import logging
from typing import Callable, Optional, Set, TypeVar

from .config import AppConfig, LabelingConfig
from .exceptions import UpstreamQueryFailure
from .github.client import GitHubAPIError, GitHubClient
from .github.gateway import PullRequestGateway
from .labeling.classifier import PathClassifier
from .labeling.mass_changes import MassChangeThresholds, detect_mass_change
from .labeling.reconciler import apply_plan, reconcile
from .labeling.review import check_review_needed
from .models.event import PullRequestEvent
from .models.labels import Label
from .models.outcome import Applied, RunOutcome, Skipped
from .models.pr_files import PullRequestSnapshot


logger = logging.getLogger(__name__)

T = TypeVar("T")


class PullRequestLabeler:
    """
    Main labeler interface.

    Evaluates a PR in a fixed order:
    1. Skip drafts
    2. Classify changed files and detect mass changes
    3. Check requested reviewers
    4. Reconcile against current labels and apply the plan
    """

    def __init__(
        self,
        gateway,
        classifier: Optional[PathClassifier] = None,
        thresholds: Optional[MassChangeThresholds] = None,
        dry_run: bool = False,
    ):
        """
        Initialize the labeler.

        Args:
            gateway: Collaborator providing PR queries and label mutations
            classifier: Path classifier (default rules when omitted)
            thresholds: Mass-change thresholds (defaults when omitted)
            dry_run: Compute the plan without mutating labels
        """
        self.gateway = gateway
        self.classifier = classifier or PathClassifier()
        self.thresholds = thresholds or MassChangeThresholds()
        self.dry_run = dry_run

    @classmethod
    def from_config(cls, config: AppConfig, repository: Optional[str] = None) -> "PullRequestLabeler":
        """
        Build a GitHub-backed labeler from configuration.

        Args:
            config: Application configuration
            repository: ``owner/repo``, overriding the configured repository
        """
        repository = repository or config.github.repository
        if not repository:
            raise ValueError("Repository is required (owner/repo)")

        client = GitHubClient(
            config.github.token,
            base_url=config.github.api_base_url,
            timeout=config.github.timeout_seconds,
        )
        return cls.from_labeling_config(PullRequestGateway(client, repository), config.labeling)

    @classmethod
    def from_labeling_config(cls, gateway, labeling: LabelingConfig) -> "PullRequestLabeler":
        return cls(
            gateway,
            classifier=PathClassifier.with_tooling_extensions(labeling.tooling_extensions),
            thresholds=labeling.thresholds,
            dry_run=labeling.dry_run,
        )

    def evaluate_event(self, event: PullRequestEvent) -> RunOutcome:
        """Evaluate the PR referenced by a pull_request event."""
        return self.evaluate(event.pr_number)

    def evaluate(self, pr_number: Optional[int]) -> RunOutcome:
        """
        Evaluate one PR and reconcile its labels.

        Args:
            pr_number: Pull request number; None when the trigger had no PR

        Returns:
            Skipped or Applied outcome

        Raises:
            UpstreamQueryFailure: If reading PR state from GitHub failed
            UpstreamMutationFailure: If adding or removing labels failed
        """
        if not pr_number or pr_number <= 0:
            logger.info("Could not determine PR number, skipping")
            return Skipped(reason="missing PR number")

        if self._query(pr_number, "get draft status", self.gateway.is_draft):
            logger.info(f"PR #{pr_number} is a draft, skipping")
            return Skipped(reason="draft", pr_number=pr_number)

        changed_files = tuple(self._query(pr_number, "list changed files", self.gateway.list_changed_files))
        logger.info(f"PR #{pr_number}: {len(changed_files)} changed files")

        desired: Set[Label] = set(self.classifier.classify_all(changed_files))

        mass_change = detect_mass_change(changed_files, self.thresholds)
        if mass_change is not None:
            desired.add(mass_change)

        reviewers = frozenset(
            self._query(pr_number, "list requested reviewers", self.gateway.list_requested_reviewers)
        )
        review_label = check_review_needed(reviewers)
        if review_label is not None:
            desired.add(review_label)

        current_labels = frozenset(
            self._query(pr_number, "list current labels", self.gateway.list_current_labels)
        )

        snapshot = PullRequestSnapshot(
            number=pr_number,
            is_draft=False,
            changed_files=changed_files,
            current_labels=current_labels,
            requested_reviewers=reviewers,
        )

        plan = reconcile(desired, snapshot.current_labels)
        logger.info(
            f"PR #{pr_number}: desired labels: {', '.join(sorted(label.value for label in desired)) or '-'}"
        )

        if plan.is_empty:
            logger.info(f"PR #{pr_number}: labels already up to date")
        elif self.dry_run:
            logger.info(
                f"PR #{pr_number}: dry run, would add {sorted(plan.to_add)} and remove {sorted(plan.to_remove)}"
            )
        else:
            apply_plan(self.gateway, pr_number, plan)
            if plan.to_add:
                logger.info(f"Labels added: {', '.join(sorted(plan.to_add))}")
            if plan.to_remove:
                logger.info(f"Labels removed: {', '.join(sorted(plan.to_remove))}")

        return Applied(
            pr_number=pr_number,
            added=plan.to_add,
            removed=plan.to_remove,
            dry_run=self.dry_run,
            snapshot=snapshot,
        )

    def _query(self, pr_number: int, operation: str, call: Callable[[int], T]) -> T:
        """Run a gateway read, wrapping failures with PR and operation context."""
        try:
            return call(pr_number)
        except (GitHubAPIError, ValueError) as e:
            logger.error(f"PR #{pr_number}: {operation} failed: {e}")
            raise UpstreamQueryFailure(pr_number, operation, e) from e
