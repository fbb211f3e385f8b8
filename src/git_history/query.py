"""Query validation, fetch parameter building, and pagination."""

from typing import Optional, Sequence

from .exceptions import InvalidQueryError
from .models import Commit, FetchParameters, HistoryQuery, HistoryResult


class QueryEngine:
    """Turns history queries into fetch parameters and result pages."""

    def validate(self, query: HistoryQuery) -> None:
        """Reject queries with negative pagination values."""
        if query.max_count is not None and query.max_count < 0:
            raise InvalidQueryError("max_count must not be negative")

        if query.skip is not None and query.skip < 0:
            raise InvalidQueryError("skip must not be negative")

    def build_fetch_parameters(
        self,
        query: HistoryQuery,
        file_path: Optional[str] = None,
    ) -> FetchParameters:
        """Map a query onto the options a command source understands.

        ``skip`` becomes a start revision N commits before the tip, so the
        source itself drops the newest commits.
        """
        self.validate(query)

        return FetchParameters(
            max_count=query.max_count or None,
            start_from=f"HEAD~{query.skip}" if query.skip else None,
            file_path=file_path,
        )

    def execute(self, commits: Sequence[Commit], query: HistoryQuery) -> HistoryResult:
        """Paginate already-normalized commits.

        Date, author, path, merge, and sort options are carried on the
        query but not applied here.
        """
        self.validate(query)

        total_count = len(commits)
        max_count = query.max_count or total_count
        skip = query.skip or 0

        return HistoryResult(
            commits=tuple(commits[skip:skip + max_count]),
            total_count=total_count,
            has_more=skip + max_count < total_count,
            query=query,
        )
