"""Custom exceptions for the git history system."""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Kinds of failure a git history operation can report."""
    REPOSITORY_NOT_FOUND = "repository_not_found"
    INVALID_REPOSITORY = "invalid_repository"
    GIT_COMMAND_ERROR = "git_command_error"
    INVALID_QUERY = "invalid_query"
    DATA_PROCESSING_ERROR = "data_processing_error"
    CACHE_ERROR = "cache_error"


class GitHistoryError(Exception):
    """Base exception for git history errors.

    Every error carries a ``kind`` so callers can branch on the failure
    category without depending on the concrete subclass.
    """

    kind: ErrorKind = ErrorKind.GIT_COMMAND_ERROR

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, cause: Optional[BaseException] = None):
        """Initialize with message, optional details, and cause."""
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """String representation with details."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class RepositoryNotFoundError(GitHistoryError):
    """The repository check itself could not be carried out."""
    kind = ErrorKind.REPOSITORY_NOT_FOUND

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        super().__init__(f"Repository not found at path: {path}", details={"path": path}, cause=cause)
        self.path = path


class InvalidRepositoryError(GitHistoryError):
    """The path was reachable but is not a git repository."""
    kind = ErrorKind.INVALID_REPOSITORY

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        super().__init__(f"Invalid git repository at path: {path}", details={"path": path}, cause=cause)
        self.path = path


class GitCommandError(GitHistoryError):
    """A command source operation failed."""
    kind = ErrorKind.GIT_COMMAND_ERROR

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        super().__init__(f"Git command failed: {operation}", cause=cause)
        self.operation = operation


class InvalidQueryError(GitHistoryError):
    """Query parameters failed validation."""
    kind = ErrorKind.INVALID_QUERY

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(f"Invalid query: {message}", cause=cause)


class DataProcessingError(GitHistoryError):
    """Raw data was fetched but could not be normalized."""
    kind = ErrorKind.DATA_PROCESSING_ERROR

    def __init__(self, message: str, commit_hash: Optional[str] = None, cause: Optional[BaseException] = None):
        details = {"commit": commit_hash} if commit_hash else None
        super().__init__(f"Data processing failed: {message}", details=details, cause=cause)
        self.commit_hash = commit_hash


class CacheError(GitHistoryError):
    """Reserved for a caching layer."""
    kind = ErrorKind.CACHE_ERROR

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        super().__init__(f"Cache operation failed: {operation}", cause=cause)
