"""
Property-based tests for classification and label reconciliation.
"""

from hypothesis import given, strategies as st

from pr_labeler.labeling.classifier import classify
from pr_labeler.labeling.mass_changes import detect_mass_change
from pr_labeler.labeling.reconciler import REMOVABLE_LABELS, reconcile
from pr_labeler.models.labels import Label
from pr_labeler.models.pr_files import ChangedFile, FileStatus


segment = st.text(alphabet='abcdefghijklmnopqrstuvwxyz0123456789-', min_size=1, max_size=12)
locale = st.text(alphabet='abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_', min_size=2, max_size=6)
non_rename_status = st.sampled_from([FileStatus.ADDED, FileStatus.MODIFIED, FileStatus.REMOVED])

all_labels = st.sampled_from(list(Label))
label_strings = st.one_of(
    st.sampled_from([label.value for label in Label]),
    st.text(min_size=1, max_size=20),
)


class TestClassificationProperties:
    """Property tests for the path classifier."""

    @given(platform=segment, name=segment)
    def test_added_main_page_is_new_command(self, platform, name):
        file = ChangedFile(f'pages/{platform}/{name}.md', FileStatus.ADDED)
        assert classify(file) is Label.NEW_COMMAND

    @given(platform=segment, name=segment, status=st.sampled_from([FileStatus.MODIFIED, FileStatus.REMOVED]))
    def test_changed_main_page_is_page_edit(self, platform, name, status):
        assert classify(ChangedFile(f'pages/{platform}/{name}.md', status)) is Label.PAGE_EDIT

    @given(platform=segment, name=segment, old_name=segment)
    def test_renamed_main_page_is_page_edit(self, platform, name, old_name):
        file = ChangedFile(
            f'pages/{platform}/{name}.md',
            FileStatus.RENAMED,
            previous_filename=f'pages/{platform}/{old_name}.md',
        )
        assert classify(file) is Label.PAGE_EDIT

    @given(lang=locale, platform=segment, name=segment, status=non_rename_status)
    def test_translation_pages(self, lang, platform, name, status):
        expected = Label.NEW_TRANSLATION if status is FileStatus.ADDED else Label.TRANSLATION_EDIT
        assert classify(ChangedFile(f'pages.{lang}/{platform}/{name}.md', status)) is expected

    @given(directory=segment, name=segment, ext=st.sampled_from(['js', 'ts', 'py', 'sh', 'yml', 'json']),
           status=non_rename_status)
    def test_tooling_extensions(self, directory, name, ext, status):
        assert classify(ChangedFile(f'scripts/{directory}/{name}.{ext}', status)) is Label.TOOLING

    @given(filename=st.text(min_size=1, max_size=60), status=non_rename_status)
    def test_classification_is_deterministic(self, filename, status):
        file = ChangedFile(filename, status)
        label = classify(file)
        assert label == classify(file)
        assert label is None or label in Label
        assert label not in (Label.MASS_CHANGES, Label.REVIEW_NEEDED, Label.WAITING)

    @given(page_count=st.integers(min_value=0, max_value=15),
           translation_count=st.integers(min_value=0, max_value=20))
    def test_mass_change_thresholds(self, page_count, translation_count):
        files = [ChangedFile(f'pages/common/p{i}.md', FileStatus.MODIFIED) for i in range(page_count)]
        files += [ChangedFile(f'pages.it/common/t{i}.md', FileStatus.ADDED) for i in range(translation_count)]

        result = detect_mass_change(files)

        if page_count > 5 or translation_count > 10:
            assert result is Label.MASS_CHANGES
        else:
            assert result is None


class TestReconciliationProperties:
    """Property tests for reconcile."""

    @given(desired=st.sets(all_labels), current=st.sets(label_strings))
    def test_second_run_is_empty(self, desired, current):
        first = reconcile(desired, current)
        labels_after = first.apply_to(current)

        second = reconcile(desired, labels_after)

        assert second.is_empty

    @given(desired=st.sets(all_labels), current=st.sets(label_strings))
    def test_only_removable_labels_are_removed(self, desired, current):
        plan = reconcile(desired, current)
        assert plan.to_remove <= REMOVABLE_LABELS
        assert plan.to_remove <= current

    @given(desired=st.sets(all_labels), current=st.sets(label_strings))
    def test_desired_labels_present_after_apply(self, desired, current):
        labels_after = reconcile(desired, current).apply_to(current)
        assert {label.value for label in desired} <= labels_after
