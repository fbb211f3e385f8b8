"""Data models for normalized git history."""

from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_AUTHOR_NAME = "Unknown"
UNKNOWN_AUTHOR_EMAIL = "unknown@example.com"
UNKNOWN_PATH = "unknown"
SHORT_HASH_LENGTH = 7


class ChangeType(str, Enum):
    """Types of file changes in git commits."""
    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"
    RENAMED = "renamed"
    COPIED = "copied"  # reserved, never produced by the classifier


class SortBy(str, Enum):
    """Fields a history query may be sorted by."""
    DATE = "date"
    AUTHOR = "author"
    HASH = "hash"


class SortOrder(str, Enum):
    """Sort direction for history queries."""
    ASC = "asc"
    DESC = "desc"


class Author(BaseModel):
    """Author or committer of a commit."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    timestamp: datetime


class FileChange(BaseModel):
    """Represents a file change in a git commit."""
    model_config = ConfigDict(frozen=True)

    path: str
    change_type: ChangeType = ChangeType.MODIFIED
    insertions: Optional[int] = Field(default=None, ge=0)
    deletions: Optional[int] = Field(default=None, ge=0)
    old_path: Optional[str] = None  # set only for renames


class CommitStats(BaseModel):
    """Aggregate line statistics for a commit with at least one file change."""
    model_config = ConfigDict(frozen=True)

    total_insertions: int = Field(ge=0)
    total_deletions: int = Field(ge=0)
    files_changed: int = Field(gt=0)


class Commit(BaseModel):
    """Normalized, immutable git commit."""
    model_config = ConfigDict(frozen=True)

    hash: str
    short_hash: str
    author: Author
    committer: Author
    message: str
    subject: str
    body: Optional[str] = None
    timestamp: datetime
    files: Tuple[FileChange, ...] = ()
    is_merge: bool = False
    parents: Tuple[str, ...] = ()
    stats: Optional[CommitStats] = None


class HistoryQuery(BaseModel):
    """Filtering and pagination options for a history request.

    Only ``max_count`` and ``skip`` are applied today. The remaining
    filters, and any extra keyword, are accepted and carried along so that
    callers can start sending them before a filtering pass exists.
    """
    model_config = ConfigDict(frozen=True, extra="allow")

    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    authors: Optional[Tuple[str, ...]] = None
    author_pattern: Optional[str] = None
    file_paths: Optional[Tuple[str, ...]] = None
    file_pattern: Optional[str] = None
    max_count: Optional[int] = None
    skip: Optional[int] = None
    include_merges: Optional[bool] = None
    sort_by: Optional[SortBy] = None
    sort_order: Optional[SortOrder] = None


class HistoryResult(BaseModel):
    """A page of commits produced by a history query."""
    model_config = ConfigDict(frozen=True)

    commits: Tuple[Commit, ...] = ()
    total_count: int = Field(ge=0)
    has_more: bool
    query: HistoryQuery


class RepositoryInfo(BaseModel):
    """Snapshot of repository metadata."""
    model_config = ConfigDict(frozen=True)

    path: str
    is_repository: bool
    current_branch: Optional[str] = None
    remotes: Optional[Tuple[str, ...]] = None
    last_commit: Optional[Commit] = None


class RawFileChange(BaseModel):
    """File entry embedded in a raw commit record."""
    model_config = ConfigDict(extra="ignore")

    file: Optional[str] = None
    path: Optional[str] = None
    before: Optional[str] = None
    binary: bool = False
    insertions: Optional[int] = None
    deletions: Optional[int] = None

    @property
    def current_path(self) -> Optional[str]:
        """Path the file has after the change."""
        return self.file or self.path


class RawDiff(BaseModel):
    """Diff summary embedded in a raw commit record."""
    model_config = ConfigDict(extra="ignore")

    files: Optional[Tuple[RawFileChange, ...]] = None


class RawCommitRecord(BaseModel):
    """Commit as handed over by a command source, before normalization."""
    model_config = ConfigDict(extra="ignore")

    hash: str
    date: str
    message: str = ""
    author_name: str = ""
    author_email: str = ""
    parents: Optional[Tuple[str, ...]] = None
    diff: Optional[RawDiff] = None


class FetchParameters(BaseModel):
    """Source-level options derived from a history query."""
    model_config = ConfigDict(frozen=True)

    max_count: Optional[int] = None
    start_from: Optional[str] = None
    file_path: Optional[str] = None
