"""Normalized, queryable git commit history."""

__version__ = "0.1.0"

from .config import Config
from .exceptions import (
    CacheError,
    DataProcessingError,
    ErrorKind,
    GitCommandError,
    GitHistoryError,
    InvalidQueryError,
    InvalidRepositoryError,
    RepositoryNotFoundError,
)
from .logging import get_logger
from .models import (
    Author,
    ChangeType,
    Commit,
    CommitStats,
    FileChange,
    HistoryQuery,
    HistoryResult,
    RepositoryInfo,
)
from .query import QueryEngine
from .service import HistoryService

__all__ = [
    "Author",
    "CacheError",
    "ChangeType",
    "Commit",
    "CommitStats",
    "Config",
    "DataProcessingError",
    "ErrorKind",
    "FileChange",
    "GitCommandError",
    "GitHistoryError",
    "HistoryQuery",
    "HistoryResult",
    "HistoryService",
    "InvalidQueryError",
    "InvalidRepositoryError",
    "QueryEngine",
    "RepositoryInfo",
    "RepositoryNotFoundError",
    "get_logger",
]
