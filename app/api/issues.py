"""이슈 라우터 — 이슈 생성/조회/해결 API.

Issue Router — Create, list and resolve issues.
There is no delete endpoint; issues are kept for the dashboard history.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.issue import IssueCreate, IssueResponse
from app.services.issue_service import issue_service

router: APIRouter = APIRouter()


@router.post("", response_model=IssueResponse, status_code=201)
async def create_issue(
    data: IssueCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> IssueResponse:
    """이슈 생성. businessId는 서버가 발급하고 상태는 new."""
    issue = await issue_service.create_issue(db, data)
    await issue_service.commit(db)
    return IssueResponse.model_validate(issue)


@router.get("", response_model=list[IssueResponse])
async def list_issues(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[IssueResponse]:
    """전체 이슈 목록 조회."""
    issues = await issue_service.list_issues(db)
    return [IssueResponse.model_validate(issue) for issue in issues]


@router.put("/{business_id}", response_model=IssueResponse)
async def resolve_issue(
    business_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    body: Annotated[Any, Body()] = None,
) -> IssueResponse:
    """이슈 해결 처리. 요청 본문은 검증하지 않고 무시, 항상 resolved로 전환."""
    issue = await issue_service.resolve_issue(db, business_id)
    await issue_service.commit(db)
    return IssueResponse.model_validate(issue)
