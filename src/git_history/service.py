"""History service orchestrating fetch, normalization, and pagination."""

import asyncio
from typing import List, Optional

from .exceptions import (
    DataProcessingError,
    GitCommandError,
    GitHistoryError,
    InvalidRepositoryError,
    RepositoryNotFoundError,
)
from .logging import get_logger
from .models import Commit, FetchParameters, HistoryQuery, HistoryResult, RepositoryInfo
from .processing.normalizer import CommitNormalizer
from .query import QueryEngine
from .sources.base import CommandSource

logger = get_logger(__name__)


class HistoryService:
    """Queries normalized commit history from a command source."""

    def __init__(
        self,
        source: CommandSource,
        normalizer: Optional[CommitNormalizer] = None,
        query_engine: Optional[QueryEngine] = None,
    ):
        self.source = source
        self.normalizer = normalizer or CommitNormalizer()
        self.query_engine = query_engine or QueryEngine()

    async def validate_repository(self) -> None:
        """Confirm the source points at a git repository."""
        try:
            is_repo = await self.source.is_valid_repository()
        except InvalidRepositoryError:
            raise
        except Exception as e:
            raise RepositoryNotFoundError(self.source.path, cause=e)

        if not is_repo:
            raise InvalidRepositoryError(self.source.path)

    async def get_repository_info(self) -> RepositoryInfo:
        """Snapshot of branch, remotes, and latest commit.

        Any failure is reported as a non-repository rather than raised. The
        latest commit is best effort: a repository without commits is still
        a repository.
        """
        try:
            await self.validate_repository()

            current_branch, remotes, latest = await asyncio.gather(
                self.source.fetch_current_branch(),
                self.source.fetch_remotes(),
                self.source.fetch_log(FetchParameters(max_count=1)),
                return_exceptions=True,
            )
            for result in (current_branch, remotes):
                if isinstance(result, Exception):
                    raise result

            last_commit = None
            if isinstance(latest, Exception):
                logger.debug("latest commit unavailable", path=self.source.path, error=str(latest))
            elif latest:
                last_commit = self.normalizer.normalize(latest[0])

            return RepositoryInfo(
                path=self.source.path,
                is_repository=True,
                current_branch=current_branch,
                remotes=tuple(remotes),
                last_commit=last_commit,
            )
        except Exception as e:
            logger.debug("repository info unavailable", path=self.source.path, error=str(e))
            return RepositoryInfo(path=self.source.path, is_repository=False)

    async def query_history(self, query: Optional[HistoryQuery] = None) -> HistoryResult:
        """Query repository history with pagination."""
        return await self._history(query or HistoryQuery(), None, "query history")

    async def get_file_history(self, file_path: str, query: Optional[HistoryQuery] = None) -> HistoryResult:
        """Query the history of a single path."""
        return await self._history(query or HistoryQuery(), file_path, f"get file history for {file_path}")

    async def _history(self, query: HistoryQuery, file_path: Optional[str], operation: str) -> HistoryResult:
        try:
            params = self.query_engine.build_fetch_parameters(query, file_path=file_path)
            records = await self.source.fetch_log(params)
            commits = self.normalizer.normalize_many(records)

            # The source already skipped the newest commits via start_from.
            page = self.query_engine.execute(commits, query.model_copy(update={"skip": None}))
            logger.debug(
                "history fetched",
                operation=operation,
                fetched=len(records),
                returned=len(page.commits),
            )
            return page.model_copy(update={"query": query})
        except GitHistoryError:
            raise
        except Exception as e:
            raise GitCommandError(operation, cause=e)

    async def get_commit(self, commit_hash: str, enhanced: bool = False) -> Optional[Commit]:
        """Get a single commit, optionally with diff-derived files and stats.

        Enhancement is best effort: when the diff or stat fetch fails the
        plain commit is returned.
        """
        try:
            record = await self.source.fetch_commit(commit_hash)
            if record is None:
                return None

            commit = self.normalizer.normalize(record)
            if not enhanced:
                return commit

            diff_text, stat_text = await asyncio.gather(
                self.source.fetch_diff_text(commit_hash),
                self.source.fetch_stat_text(commit_hash),
                return_exceptions=True,
            )
            failures = [r for r in (diff_text, stat_text) if isinstance(r, Exception)]
            if failures:
                logger.debug(
                    "commit enhancement skipped",
                    commit=commit.short_hash,
                    errors=[str(f) for f in failures],
                )
                return commit

            try:
                return self.normalizer.enhance(commit, diff_text=diff_text, stat_text=stat_text)
            except DataProcessingError as e:
                logger.debug("commit enhancement skipped", commit=commit.short_hash, errors=[str(e)])
                return commit
        except GitHistoryError:
            raise
        except Exception as e:
            raise GitCommandError(f"get commit {commit_hash}", cause=e)

    async def get_branches(self, include_remote: bool = False) -> List[str]:
        """List branch names."""
        return await self.source.fetch_branches(include_remote)

    async def get_current_branch(self) -> Optional[str]:
        """Name of the checked-out branch."""
        return await self.source.fetch_current_branch()

    async def get_remotes(self) -> List[str]:
        """List remote names."""
        return await self.source.fetch_remotes()
