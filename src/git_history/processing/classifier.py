"""Change type classification for file entries embedded in raw commits."""

from typing import Optional

from ..models import ChangeType, FileChange, RawFileChange, UNKNOWN_PATH


def classify_counts(
    before: Optional[str],
    current: Optional[str],
    insertions: int,
    deletions: int,
) -> ChangeType:
    """Classify a non-binary change from its paths and line counts.

    A rename wins over the count rules, so a renamed file that also gained
    lines is still reported as renamed. A 0/0 change falls through to
    modified.
    """
    if before and current != before:
        return ChangeType.RENAMED

    if insertions > 0 and deletions == 0:
        return ChangeType.ADDED

    if insertions == 0 and deletions > 0:
        return ChangeType.DELETED

    return ChangeType.MODIFIED


def classify_change(raw: RawFileChange) -> ChangeType:
    """Determine the change type for a raw file entry."""
    # No line stats exist for binary files.
    if raw.binary:
        return ChangeType.MODIFIED

    return classify_counts(
        raw.before,
        raw.current_path,
        raw.insertions or 0,
        raw.deletions or 0,
    )


def build_file_change(raw: RawFileChange) -> FileChange:
    """Convert a raw file entry into a FileChange."""
    change_type = classify_change(raw)

    return FileChange(
        path=raw.current_path or UNKNOWN_PATH,
        change_type=change_type,
        insertions=raw.insertions or None,
        deletions=raw.deletions or None,
        old_path=raw.before if change_type == ChangeType.RENAMED else None,
    )
