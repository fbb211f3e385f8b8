"""Command source interface consumed by the history service."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import FetchParameters, RawCommitRecord


class CommandSource(ABC):
    """Abstract provider of raw git data for one repository."""

    path: str

    @abstractmethod
    async def is_valid_repository(self) -> bool:
        """Check whether ``path`` is a git repository."""
        pass

    @abstractmethod
    async def fetch_log(self, params: FetchParameters) -> List[RawCommitRecord]:
        """Fetch raw commit records, newest first."""
        pass

    @abstractmethod
    async def fetch_commit(self, commit_hash: str) -> Optional[RawCommitRecord]:
        """Fetch one commit record, or None when it does not exist."""
        pass

    @abstractmethod
    async def fetch_diff_text(self, commit_hash: str) -> str:
        """Fetch the unified diff introduced by a commit."""
        pass

    @abstractmethod
    async def fetch_stat_text(self, commit_hash: str) -> str:
        """Fetch the diffstat summary of a commit."""
        pass

    @abstractmethod
    async def fetch_branches(self, include_remote: bool = False) -> List[str]:
        """List branch names."""
        pass

    @abstractmethod
    async def fetch_current_branch(self) -> Optional[str]:
        """Name of the checked-out branch, None when detached."""
        pass

    @abstractmethod
    async def fetch_remotes(self) -> List[str]:
        """List remote names."""
        pass
