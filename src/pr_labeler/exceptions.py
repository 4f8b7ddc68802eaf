"""Custom exceptions for the PR labeler."""

from typing import List, Optional, Tuple


class LabelerError(Exception):
    """Base exception for all labeler errors."""


class ConfigError(LabelerError):
    """Configuration-related errors."""


class UpstreamQueryFailure(LabelerError):
    """A read from GitHub failed; the evaluation was aborted."""

    def __init__(self, pr_number: Optional[int], operation: str, cause: Exception):
        super().__init__(f"PR #{pr_number}: {operation} failed: {cause}")
        self.pr_number = pr_number
        self.operation = operation
        self.cause = cause


class UpstreamMutationFailure(LabelerError):
    """One or more label mutations failed after all of them were attempted."""

    def __init__(self, pr_number: int, failures: List[Tuple[str, Exception]]):
        details = "; ".join(f"{operation}: {error}" for operation, error in failures)
        super().__init__(f"PR #{pr_number}: {len(failures)} label mutation(s) failed: {details}")
        self.pr_number = pr_number
        self.failures = failures
