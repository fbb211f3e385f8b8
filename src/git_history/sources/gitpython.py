"""GitPython-backed command source."""

import asyncio
from functools import partial
from typing import Any, Callable, List, Optional

import git
from git import InvalidGitRepositoryError, Repo

from ..exceptions import GitCommandError, InvalidRepositoryError
from ..logging import get_logger
from ..models import FetchParameters, RawCommitRecord
from .base import CommandSource

logger = get_logger(__name__)


class GitPythonSource(CommandSource):
    """Reads raw history from a local repository through GitPython.

    GitPython is blocking, so every call runs in the default executor.
    """

    def __init__(self, repo_path: str):
        """Initialize with path to a local git repository."""
        self.path = str(repo_path)
        self._repo: Optional[Repo] = None

    @property
    def repo(self) -> Repo:
        """Open the repository on first use."""
        if self._repo is None:
            try:
                self._repo = Repo(self.path)
            except InvalidGitRepositoryError as e:
                raise InvalidRepositoryError(self.path, cause=e)
        return self._repo

    async def _run(self, operation: str, func: Callable[..., Any], *args: Any) -> Any:
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, partial(func, *args))
        except InvalidRepositoryError:
            raise
        except (git.GitCommandError, ValueError, OSError) as e:
            logger.debug("git operation failed", operation=operation, error=str(e))
            raise GitCommandError(operation, cause=e)

    async def is_valid_repository(self) -> bool:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._check_repository)

    def _check_repository(self) -> bool:
        # A missing path raises NoSuchPathError, which is not an answer.
        try:
            self._repo = Repo(self.path)
        except InvalidGitRepositoryError:
            return False
        return True

    async def fetch_log(self, params: FetchParameters) -> List[RawCommitRecord]:
        return await self._run(f"get log with options: {params.model_dump_json()}", self._read_log, params)

    def _read_log(self, params: FetchParameters) -> List[RawCommitRecord]:
        kwargs = {}
        if params.max_count:
            kwargs["max_count"] = params.max_count
        if params.file_path:
            kwargs["paths"] = [params.file_path]

        rev = params.start_from or "HEAD"
        return [self._to_record(commit) for commit in self.repo.iter_commits(rev, **kwargs)]

    async def fetch_commit(self, commit_hash: str) -> Optional[RawCommitRecord]:
        return await self._run(f"get commit details for {commit_hash}", self._read_commit, commit_hash)

    def _read_commit(self, commit_hash: str) -> Optional[RawCommitRecord]:
        try:
            commit = self.repo.commit(commit_hash)
        except (git.BadName, git.BadObject, ValueError):
            return None
        return self._to_record(commit)

    async def fetch_diff_text(self, commit_hash: str) -> str:
        return await self._run(f"get diff for commit {commit_hash}", self._show, commit_hash, "--format=")

    async def fetch_stat_text(self, commit_hash: str) -> str:
        return await self._run(f"get stats for commit {commit_hash}", self._show, commit_hash, "--stat", "--format=")

    def _show(self, *args: str) -> str:
        return self.repo.git.show(*args)

    async def fetch_branches(self, include_remote: bool = False) -> List[str]:
        return await self._run("get branches", self._read_branches, include_remote)

    def _read_branches(self, include_remote: bool) -> List[str]:
        branches = [head.name for head in self.repo.branches]
        if include_remote:
            branches.extend(
                f"remotes/{ref.name}" for ref in self.repo.refs if isinstance(ref, git.RemoteReference)
            )
        return branches

    async def fetch_current_branch(self) -> Optional[str]:
        return await self._run("get current branch", self._read_current_branch)

    def _read_current_branch(self) -> Optional[str]:
        if self.repo.head.is_detached:
            return None
        return self.repo.active_branch.name

    async def fetch_remotes(self) -> List[str]:
        return await self._run("get remotes", lambda: [remote.name for remote in self.repo.remotes])

    @staticmethod
    def _to_record(commit: git.Commit) -> RawCommitRecord:
        return RawCommitRecord(
            hash=commit.hexsha,
            date=commit.authored_datetime.isoformat(),
            message=commit.message,
            author_name=commit.author.name or "",
            author_email=commit.author.email or "",
            parents=tuple(parent.hexsha for parent in commit.parents),
        )
