"""차트 서비스 — 대시보드 차트 데이터 조회.

Chart Service — Loads issues from the store and hands them to the
aggregation functions. Each call reads the current records; nothing is cached.
A failed store query raises StoreUnavailableError instead of returning an
empty chart, so callers can tell "no data" from "query failed".
"""

from typing import Awaitable, Callable, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.issue import Issue
from app.repositories.issue_repository import issue_repository
from app.services.aggregation import (
    assignee_throughput,
    resolution_timeline,
    severity_breakdown,
    status_breakdown,
)
from app.utils.exceptions import StoreUnavailableError


async def _load(
    loader: Callable[[AsyncSession], Awaitable[Sequence[Issue]]],
    db: AsyncSession,
) -> Sequence[Issue]:
    try:
        return await loader(db)
    except SQLAlchemyError as exc:
        raise StoreUnavailableError(f"Chart data unavailable: {type(exc).__name__}") from exc


class ChartService:
    """차트 서비스.

    Chart data service for the dashboard views.
    """

    async def get_severity_chart(self, db: AsyncSession) -> dict:
        """심각도 분포 — {labels, data}."""
        return severity_breakdown(await _load(issue_repository.list_all, db))

    async def get_status_chart(self, db: AsyncSession) -> dict:
        """상태 분포 — {labels, data}."""
        return status_breakdown(await _load(issue_repository.list_all, db))

    async def get_timeline_chart(self, db: AsyncSession) -> dict:
        """해결 타임라인 — resolved 이슈만 조회 (Resolved issues only)."""
        return resolution_timeline(await _load(issue_repository.list_resolved, db))

    async def get_assignee_chart(self, db: AsyncSession) -> dict:
        """담당자별 처리량 — {labels, datasets}."""
        return assignee_throughput(await _load(issue_repository.list_all, db))


chart_service: ChartService = ChartService()
