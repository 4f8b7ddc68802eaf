"""
PR File Parser

Converts GitHub API responses into labeler models: changed files,
label names and requested reviewer identities.
"""

import logging
from typing import Dict, List

from ..models.pr_files import ChangedFile, FileStatus


logger = logging.getLogger(__name__)


class PRFileParser:
    """
    Parser for GitHub pull request data.

    Normalizes file statuses to the four the labeler understands and keeps
    ``previous_filename`` only for renames.
    """

    status_mapping = {
        'added': FileStatus.ADDED,
        'modified': FileStatus.MODIFIED,
        'removed': FileStatus.REMOVED,
        'renamed': FileStatus.RENAMED,
        'copied': FileStatus.ADDED,
        'changed': FileStatus.MODIFIED,
        'unchanged': FileStatus.MODIFIED,
    }

    def parse_changed_files(self, files_data: List[Dict]) -> List[ChangedFile]:
        """
        Parse the PR files listing.

        Args:
            files_data: File entries from ``GET /pulls/{n}/files``

        Returns:
            ChangedFile per entry, in API order
        """
        files = [self.parse_changed_file(file_data) for file_data in files_data]
        logger.debug(f"Parsed {len(files)} changed files")
        return files

    def parse_changed_file(self, file_data: Dict) -> ChangedFile:
        """
        Parse one file entry.

        Raises:
            ValueError: If the entry is missing required fields
        """
        filename = file_data.get('filename')
        if not filename:
            raise ValueError(f"File entry without filename: {file_data}")

        status = self._determine_status(file_data.get('status', 'modified'))
        previous_filename = None
        if status is FileStatus.RENAMED:
            previous_filename = file_data.get('previous_filename')

        return ChangedFile(
            filename=filename,
            status=status,
            previous_filename=previous_filename,
        )

    def _determine_status(self, status: str) -> FileStatus:
        """
        Determine file status from GitHub status.

        Args:
            status: GitHub file status

        Returns:
            Normalized file status
        """
        if status not in self.status_mapping:
            logger.warning(f"Unknown file status '{status}', treating as modified")
        return self.status_mapping.get(status, FileStatus.MODIFIED)

    def parse_label_names(self, labels_data: List[Dict]) -> List[str]:
        """Label names, deduplicated, in API order"""
        names: List[str] = []
        for label in labels_data:
            name = label.get('name')
            if name and name not in names:
                names.append(name)
        return names

    def parse_requested_reviewers(self, reviewers_data: Dict) -> List[str]:
        """
        Reviewer identities from the requested_reviewers response.

        Users are identified by login, teams as ``team:<slug>``.
        """
        reviewers = [user['login'] for user in reviewers_data.get('users', []) if user.get('login')]
        reviewers.extend(
            f"team:{team['slug']}" for team in reviewers_data.get('teams', []) if team.get('slug')
        )
        return reviewers
