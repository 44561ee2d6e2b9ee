"""차트 라우터 — 대시보드 차트 데이터 API.

Chart Router — Read-only endpoints returning chart-ready payloads
for the dashboard (severity, status, resolution timeline, assignee throughput).
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.services.chart_service import chart_service

router: APIRouter = APIRouter()


@router.get("/severity")
async def get_severity_chart(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    """심각도 분포 — 존재하는 심각도만 포함."""
    return await chart_service.get_severity_chart(db)


@router.get("/status")
async def get_status_chart(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    """상태 분포 (new / resolved)."""
    return await chart_service.get_status_chart(db)


@router.get("/timeline")
async def get_timeline_chart(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    """담당자별 일자별 해결 건수. 선 색상은 요청마다 임의로 정해짐."""
    return await chart_service.get_timeline_chart(db)


@router.get("/assignee")
async def get_assignee_chart(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    """담당자별 해결/신규 건수."""
    return await chart_service.get_assignee_chart(db)
