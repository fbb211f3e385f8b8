"""Tests for change type classification."""

import pytest

from git_history.models import ChangeType, RawFileChange
from git_history.processing.classifier import build_file_change, classify_change, classify_counts


class TestClassifyChange:
    """Test the classification precedence rules."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (RawFileChange(file="img.png", binary=True, insertions=5), ChangeType.MODIFIED),
            (RawFileChange(file="new.py", before="old.py", insertions=3), ChangeType.RENAMED),
            (RawFileChange(file="a.py", insertions=3, deletions=0), ChangeType.ADDED),
            (RawFileChange(file="a.py", insertions=0, deletions=4), ChangeType.DELETED),
            (RawFileChange(file="a.py", insertions=2, deletions=2), ChangeType.MODIFIED),
            (RawFileChange(file="a.py"), ChangeType.MODIFIED),
        ],
    )
    def test_classify_change(self, raw, expected):
        """Each rule applies in order."""
        assert classify_change(raw) == expected

    def test_binary_beats_rename(self):
        """Binary files are modified even when a prior path is given."""
        raw = RawFileChange(file="new.png", before="old.png", binary=True)

        assert classify_change(raw) == ChangeType.MODIFIED

    def test_rename_to_same_path_is_not_rename(self):
        """A prior path equal to the current path is not a rename."""
        assert classify_counts("same.py", "same.py", 3, 0) == ChangeType.ADDED

    def test_rename_beats_added(self):
        """A renamed file with only insertions is still renamed."""
        assert classify_counts("old.py", "new.py", 3, 0) == ChangeType.RENAMED

    def test_path_field_is_used_when_file_missing(self):
        """The ``path`` key stands in for ``file``."""
        raw = RawFileChange(path="new.py", before="old.py")

        assert classify_change(raw) == ChangeType.RENAMED


class TestBuildFileChange:
    """Test FileChange construction from raw entries."""

    def test_rename_sets_old_path(self):
        """Only renames carry an old path."""
        change = build_file_change(RawFileChange(file="new.py", before="old.py", insertions=3))

        assert change.path == "new.py"
        assert change.change_type == ChangeType.RENAMED
        assert change.old_path == "old.py"
        assert change.insertions == 3
        assert change.deletions is None

    def test_non_rename_has_no_old_path(self):
        """A binary entry with a prior path keeps no old path."""
        change = build_file_change(RawFileChange(file="new.png", before="old.png", binary=True))

        assert change.change_type == ChangeType.MODIFIED
        assert change.old_path is None

    def test_missing_path_defaults_to_unknown(self):
        """Entries without any path get a placeholder."""
        change = build_file_change(RawFileChange(insertions=1))

        assert change.path == "unknown"
