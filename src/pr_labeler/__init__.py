"""
PR Labeler

Pull request triage bot: derives labels from changed files and
reconciles them with the labels already on the PR.
"""

__version__ = "1.0.0"

from .labeler import PullRequestLabeler
from .models import ChangedFile, FileStatus, Label

__all__ = ["PullRequestLabeler", "ChangedFile", "FileStatus", "Label"]
