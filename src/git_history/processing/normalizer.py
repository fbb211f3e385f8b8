"""Normalization of raw commit records into Commit domain objects."""

from typing import Iterable, List, Optional, Sequence

from ..exceptions import DataProcessingError, GitHistoryError
from ..logging import get_logger
from ..models import (
    Author,
    Commit,
    CommitStats,
    FileChange,
    RawCommitRecord,
    RawDiff,
    SHORT_HASH_LENGTH,
    UNKNOWN_AUTHOR_EMAIL,
    UNKNOWN_AUTHOR_NAME,
)
from .classifier import build_file_change
from .diff_parser import DiffParser

logger = get_logger(__name__)

MERGE_MARKER = "merge"


def normalize_author(name: Optional[str], email: Optional[str], date: str) -> Author:
    """Build an Author, substituting defaults for blank name or email.

    ``date`` goes through pydantic's datetime parsing; a malformed value
    raises and is reported by the caller.
    """
    return Author(
        name=name if name and name.strip() else UNKNOWN_AUTHOR_NAME,
        email=email if email and email.strip() else UNKNOWN_AUTHOR_EMAIL,
        timestamp=date,
    )


def calculate_stats(files: Sequence[FileChange]) -> Optional[CommitStats]:
    """Sum line counts over files; None when there are no files."""
    if not files:
        return None

    return CommitStats(
        total_insertions=sum(f.insertions or 0 for f in files),
        total_deletions=sum(f.deletions or 0 for f in files),
        files_changed=len(files),
    )


def extract_subject(message: str) -> str:
    """First line of the commit message."""
    return message.strip().split("\n")[0]


def extract_body(message: str) -> Optional[str]:
    """Message text after the subject and the separator line."""
    lines = message.strip().split("\n")
    if len(lines) <= 2:
        return None

    body = "\n".join(lines[2:]).strip()
    return body or None


def is_merge_commit(record: RawCommitRecord) -> bool:
    """Guess whether a record is a merge.

    Parent hashes are usually missing from log output, so the message is
    checked as well. This misreports commits that merely mention merging.
    """
    if MERGE_MARKER in record.message.lower():
        return True
    return len(record.parents or ()) > 1


class CommitNormalizer:
    """Converts raw commit records into immutable Commit objects."""

    def __init__(self, diff_parser: Optional[DiffParser] = None):
        self.diff_parser = diff_parser or DiffParser()

    def normalize_many(self, records: Iterable[RawCommitRecord]) -> List[Commit]:
        """Normalize a batch of records, preserving order."""
        try:
            return [self.normalize(record) for record in records]
        except GitHistoryError:
            raise
        except Exception as e:
            raise DataProcessingError("Failed to process commits", cause=e)

    def normalize(self, record: RawCommitRecord) -> Commit:
        """Normalize a single raw commit record."""
        try:
            author = normalize_author(record.author_name, record.author_email, record.date)
            # Log output does not separate the committer from the author.
            committer = normalize_author(record.author_name, record.author_email, record.date)
            files = self._embedded_files(record.diff)

            return Commit(
                hash=record.hash,
                short_hash=record.hash[:SHORT_HASH_LENGTH],
                author=author,
                committer=committer,
                message=record.message,
                subject=extract_subject(record.message),
                body=extract_body(record.message),
                timestamp=author.timestamp,
                files=files,
                is_merge=is_merge_commit(record),
                parents=tuple(record.parents or ()),
                stats=calculate_stats(files),
            )
        except GitHistoryError:
            raise
        except Exception as e:
            raise DataProcessingError(
                f"Failed to process commit {record.hash}", commit_hash=record.hash, cause=e
            )

    def enhance(
        self,
        commit: Commit,
        diff_text: Optional[str] = None,
        stat_text: Optional[str] = None,
    ) -> Commit:
        """Return a copy of ``commit`` with files and stats taken from diff text.

        An empty parse keeps the commit's existing files and stats.
        ``stat_text`` is accepted for callers that fetch it but is not parsed.
        """
        if not diff_text:
            return commit

        try:
            parsed = self.diff_parser.parse(diff_text)
        except Exception as e:
            raise DataProcessingError(
                f"Failed to enhance commit {commit.hash}", commit_hash=commit.hash, cause=e
            )

        if not parsed:
            logger.debug("diff text produced no files", commit=commit.short_hash)
            return commit

        files = tuple(parsed)
        return commit.model_copy(update={"files": files, "stats": calculate_stats(files)})

    def _embedded_files(self, diff: Optional[RawDiff]) -> tuple:
        if diff is None or not diff.files:
            return ()
        return tuple(build_file_change(raw) for raw in diff.files)
