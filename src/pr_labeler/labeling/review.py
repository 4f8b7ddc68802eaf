"""Review-state check."""

import logging
from typing import Iterable, Optional

from ..models.labels import Label


logger = logging.getLogger(__name__)


def check_review_needed(reviewers: Iterable[str]) -> Optional[Label]:
    """Return ``Label.REVIEW_NEEDED`` when nobody has been asked to review."""
    unique_reviewers = {reviewer for reviewer in reviewers if reviewer}
    if not unique_reviewers:
        logger.info("No reviewers requested")
        return Label.REVIEW_NEEDED
    logger.debug(f"{len(unique_reviewers)} reviewer(s) requested")
    return None
