"""
End-to-end tests for PR evaluation against an in-memory gateway.
"""

import pytest

from pr_labeler.config import LabelingConfig
from pr_labeler.exceptions import UpstreamMutationFailure, UpstreamQueryFailure
from pr_labeler.labeler import PullRequestLabeler
from pr_labeler.models.event import PullRequestEvent
from pr_labeler.models.pr_files import ChangedFile, FileStatus


class TestPullRequestLabeler:
    """Full evaluation flow."""

    def test_new_page_pr(self, make_gateway):
        gateway = make_gateway(
            files=[ChangedFile('pages/common/tar.md', FileStatus.ADDED)],
            labels=['waiting'],
            reviewers=['alice'],
        )

        outcome = PullRequestLabeler(gateway).evaluate(101)

        assert outcome.status == 'applied'
        assert outcome.added == {'new command'}
        assert outcome.removed == {'waiting'}
        assert gateway.labels == ['new command']
        assert gateway.calls == [
            'is_draft',
            'list_changed_files',
            'list_requested_reviewers',
            'list_current_labels',
            'add_labels',
            'remove_label:waiting',
        ]

    def test_mixed_pr_without_reviewers(self, make_gateway):
        files = [ChangedFile(f'pages/linux/cmd{i}.md', FileStatus.MODIFIED) for i in range(6)]
        files += [
            ChangedFile('pages.de/common/git.md', FileStatus.ADDED),
            ChangedFile('MAINTAINERS.md', FileStatus.MODIFIED),
            ChangedFile('scripts/build.sh', FileStatus.MODIFIED),
        ]
        gateway = make_gateway(files=files, labels=['help wanted'])

        outcome = PullRequestLabeler(gateway).evaluate(5)

        assert outcome.added == {
            'page edit', 'new translation', 'community', 'tooling', 'mass changes', 'review needed',
        }
        assert outcome.removed == frozenset()
        assert 'help wanted' in gateway.labels
        assert outcome.snapshot.requested_reviewer_count == 0
        assert len(outcome.snapshot.changed_files) == 9

    def test_second_run_changes_nothing(self, make_gateway):
        gateway = make_gateway(
            files=[ChangedFile('README.md', FileStatus.MODIFIED)],
            labels=['waiting', 'documentation'],
            reviewers=['bob'],
        )
        labeler = PullRequestLabeler(gateway)

        first = labeler.evaluate(8)
        second = labeler.evaluate(8)

        assert first.removed == {'waiting'}
        assert not second.changed
        assert 'add_labels' not in gateway.calls

    def test_stale_bot_labels_are_kept(self, make_gateway):
        gateway = make_gateway(
            files=[ChangedFile('README.md', FileStatus.MODIFIED)],
            labels=['tooling', 'mass changes'],
            reviewers=['bob'],
        )

        outcome = PullRequestLabeler(gateway).evaluate(8)

        assert outcome.added == {'documentation'}
        assert outcome.removed == frozenset()
        assert set(gateway.labels) == {'tooling', 'mass changes', 'documentation'}

    def test_missing_pr_number_is_skipped(self, make_gateway):
        gateway = make_gateway()

        outcome = PullRequestLabeler(gateway).evaluate(None)

        assert outcome.status == 'skipped'
        assert outcome.reason == 'missing PR number'
        assert gateway.calls == []

    def test_draft_is_skipped(self, make_gateway):
        gateway = make_gateway(files=[ChangedFile('README.md', FileStatus.ADDED)], draft=True)

        outcome = PullRequestLabeler(gateway).evaluate(3)

        assert outcome.status == 'skipped'
        assert outcome.reason == 'draft'
        assert outcome.pr_number == 3
        assert gateway.calls == ['is_draft']

    def test_dry_run_does_not_mutate(self, make_gateway):
        gateway = make_gateway(files=[ChangedFile('setup.py', FileStatus.ADDED)], labels=['waiting'])

        outcome = PullRequestLabeler(gateway, dry_run=True).evaluate(4)

        assert outcome.dry_run
        assert outcome.added == {'tooling', 'review needed'}
        assert outcome.removed == {'waiting'}
        assert gateway.labels == ['waiting']
        assert 'add_labels' not in gateway.calls

    def test_labeling_config_is_applied(self, make_gateway):
        files = [ChangedFile(f'pages/common/c{i}.md', FileStatus.MODIFIED) for i in range(3)]
        files.append(ChangedFile('pyproject.toml', FileStatus.MODIFIED))
        gateway = make_gateway(files=files, reviewers=['alice'])
        labeling = LabelingConfig(max_page_edits=2, tooling_extensions=('toml',))

        outcome = PullRequestLabeler.from_labeling_config(gateway, labeling).evaluate(6)

        assert outcome.added == {'page edit', 'mass changes', 'tooling'}

    def test_evaluate_event(self, make_gateway):
        gateway = make_gateway(files=[ChangedFile('README.md', FileStatus.MODIFIED)], reviewers=['a'])
        event = PullRequestEvent.model_validate({'action': 'opened', 'pull_request': {'number': 77}})

        outcome = PullRequestLabeler(gateway).evaluate_event(event)

        assert outcome.pr_number == 77
        assert outcome.added == {'documentation'}

    def test_evaluate_event_without_pr(self, make_gateway):
        outcome = PullRequestLabeler(make_gateway()).evaluate_event(PullRequestEvent())
        assert outcome.status == 'skipped'


class TestErrorPropagation:
    """Upstream failures abort or are reported with context."""

    @pytest.mark.parametrize('operation, description', [
        ('is_draft', 'get draft status'),
        ('list_changed_files', 'list changed files'),
        ('list_requested_reviewers', 'list requested reviewers'),
        ('list_current_labels', 'list current labels'),
    ])
    def test_query_failure_aborts(self, make_gateway, operation, description):
        gateway = make_gateway(files=[ChangedFile('README.md', FileStatus.ADDED)])
        gateway.fail(operation)

        with pytest.raises(UpstreamQueryFailure) as exc_info:
            PullRequestLabeler(gateway).evaluate(12)

        assert exc_info.value.pr_number == 12
        assert exc_info.value.operation == description
        assert '#12' in str(exc_info.value)
        assert 'add_labels' not in gateway.calls

    def test_malformed_data_is_query_failure(self, make_gateway):
        gateway = make_gateway()
        gateway.fail('list_changed_files', ValueError("File entry without filename"))

        with pytest.raises(UpstreamQueryFailure):
            PullRequestLabeler(gateway).evaluate(12)

    def test_mutation_failure_after_all_attempts(self, make_gateway):
        gateway = make_gateway(files=[ChangedFile('a.py', FileStatus.ADDED)], labels=['waiting'])
        gateway.fail('add_labels')

        with pytest.raises(UpstreamMutationFailure) as exc_info:
            PullRequestLabeler(gateway).evaluate(13)

        assert 'remove_label:waiting' in gateway.calls
        assert exc_info.value.pr_number == 13
