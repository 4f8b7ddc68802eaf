"""
Mass-Change Detector

Flags PRs that touch an unusually large number of pages.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..models.labels import Label
from ..models.pr_files import ChangedFile
from .classifier import is_main_page, is_translation_page


logger = logging.getLogger(__name__)


DEFAULT_MAX_PAGE_EDITS = 5
DEFAULT_MAX_TRANSLATION_EDITS = 10


@dataclass(frozen=True)
class MassChangeThresholds:
    """Counts above which a PR is considered a mass change"""
    max_page_edits: int = DEFAULT_MAX_PAGE_EDITS
    max_translation_edits: int = DEFAULT_MAX_TRANSLATION_EDITS

    def __post_init__(self):
        if self.max_page_edits < 0 or self.max_translation_edits < 0:
            raise ValueError("Mass-change thresholds must be non-negative")


def detect_mass_change(
    files: Sequence[ChangedFile],
    thresholds: Optional[MassChangeThresholds] = None,
) -> Optional[Label]:
    """
    Detect mass changes across the whole changed-file set.

    Only the current filename is counted, never the pre-rename path.

    Args:
        files: All files changed in the PR
        thresholds: Limits to compare against (strictly greater-than)

    Returns:
        ``Label.MASS_CHANGES`` or None
    """
    thresholds = thresholds or MassChangeThresholds()

    page_count = sum(1 for f in files if is_main_page(f.filename))
    translation_count = sum(1 for f in files if is_translation_page(f.filename))
    logger.debug(f"Mass-change check: {page_count} pages, {translation_count} translations")

    if page_count > thresholds.max_page_edits or translation_count > thresholds.max_translation_edits:
        logger.info(
            f"Mass changes detected ({page_count} pages, {translation_count} translations)"
        )
        return Label.MASS_CHANGES
    return None
