"""Unified diff parsing into per-file change records."""

import re
from dataclasses import dataclass
from typing import List, Optional

from ..exceptions import DataProcessingError
from ..models import ChangeType, FileChange, UNKNOWN_PATH

DIFF_HEADER_PREFIX = "diff --git"
DIFF_HEADER_PATTERN = re.compile(r"diff --git a/(.+) b/(.+)")
NEW_FILE_PREFIX = "new file mode"
DELETED_FILE_PREFIX = "deleted file mode"
RENAME_FROM_PREFIX = "rename from "


@dataclass
class _PendingFile:
    """Mutable accumulator for the file currently being read."""
    path: Optional[str] = None
    change_type: Optional[ChangeType] = None
    insertions: Optional[int] = None
    deletions: Optional[int] = None
    old_path: Optional[str] = None

    def finalize(self) -> FileChange:
        return FileChange(
            path=self.path or UNKNOWN_PATH,
            change_type=self.change_type or ChangeType.MODIFIED,
            insertions=self.insertions or 0,
            deletions=self.deletions or 0,
            old_path=self.old_path,
        )


class DiffParser:
    """Line-oriented parser for ``git show``/``git diff`` output.

    The parser is either idle or accumulating one file. A ``diff --git``
    header closes the current file and opens the next one; everything it
    does not recognise is treated as hunk content and skipped, so malformed
    input degrades to missing counts rather than an error.
    """

    def parse(self, diff_text: str) -> List[FileChange]:
        """Parse diff text into FileChange entries in header order."""
        if not isinstance(diff_text, str):
            raise DataProcessingError(
                f"Failed to parse diff output: expected text, got {type(diff_text).__name__}"
            )

        try:
            changes: List[FileChange] = []
            current: Optional[_PendingFile] = None

            for raw_line in diff_text.split("\n"):
                line = raw_line[:-1] if raw_line.endswith("\r") else raw_line
                if line.startswith(DIFF_HEADER_PREFIX):
                    if current is not None:
                        changes.append(current.finalize())
                    current = self._parse_header(line)
                elif current is not None:
                    self._apply_line(current, line)

            if current is not None:
                changes.append(current.finalize())

            return changes
        except DataProcessingError:
            raise
        except Exception as e:
            raise DataProcessingError("Failed to parse diff output", cause=e)

    def _parse_header(self, line: str) -> _PendingFile:
        """Start a new file from a ``diff --git a/<old> b/<new>`` header."""
        match = DIFF_HEADER_PATTERN.match(line)
        if not match:
            return _PendingFile(path=UNKNOWN_PATH, change_type=ChangeType.MODIFIED)

        old_path, new_path = match.groups()
        return _PendingFile(
            path=new_path,
            change_type=ChangeType.MODIFIED,
            old_path=old_path if old_path != new_path else None,
        )

    def _apply_line(self, pending: _PendingFile, line: str) -> None:
        """Update the pending file from one line of its diff section."""
        if line.startswith(NEW_FILE_PREFIX):
            pending.change_type = ChangeType.ADDED
        elif line.startswith(DELETED_FILE_PREFIX):
            pending.change_type = ChangeType.DELETED
        elif line.startswith(RENAME_FROM_PREFIX):
            pending.change_type = ChangeType.RENAMED
            pending.old_path = line[len(RENAME_FROM_PREFIX):]
        elif line.startswith("+") and not line.startswith("+++"):
            pending.insertions = (pending.insertions or 0) + 1
        elif line.startswith("-") and not line.startswith("---"):
            pending.deletions = (pending.deletions or 0) + 1
