"""이슈 서비스.

Issue service — Business logic for creating, listing and resolving issues.
"""

import uuid
from datetime import datetime, timezone
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.issue import Issue, IssueStatus
from app.repositories.issue_repository import issue_repository
from app.schemas.issue import IssueCreate
from app.utils.exceptions import NotFoundError, StoreUnavailableError


class IssueService:

    async def commit(self, db: AsyncSession) -> None:
        """트랜잭션 커밋 — 커밋 실패도 저장소 오류로 변환 (Commit failures are store failures too)."""
        try:
            await db.commit()
        except SQLAlchemyError as exc:
            raise StoreUnavailableError(f"Could not save changes: {type(exc).__name__}") from exc

    async def create_issue(self, db: AsyncSession, data: IssueCreate) -> Issue:
        """이슈 생성 — business_id 발급, 상태는 항상 new로 시작."""
        try:
            return await issue_repository.create(
                db,
                {
                    "business_id": str(uuid.uuid4()),
                    "assignee": data.assignee,
                    "title": data.title,
                    "description": data.description,
                    "severity": data.severity.value,
                    "status": IssueStatus.NEW.value,
                },
            )
        except SQLAlchemyError as exc:
            raise StoreUnavailableError(f"Could not save issue: {type(exc).__name__}") from exc

    async def list_issues(self, db: AsyncSession) -> Sequence[Issue]:
        try:
            return await issue_repository.list_all(db)
        except SQLAlchemyError as exc:
            raise StoreUnavailableError(f"Could not load issues: {type(exc).__name__}") from exc

    async def resolve_issue(self, db: AsyncSession, business_id: str) -> Issue:
        """이슈를 resolved로 전환합니다.

        Resolve an issue by its business id. The transition is one-way;
        resolving an already resolved issue leaves it (and its updated_at) untouched.

        Raises:
            NotFoundError: 해당 business_id의 이슈가 없음 (Unknown business id)
            StoreUnavailableError: 저장소 오류 (Store query failed)
        """
        try:
            issue = await issue_repository.get_by_business_id(db, business_id)
            if issue is None:
                raise NotFoundError("Issue not found")
            if issue.status == IssueStatus.RESOLVED.value:
                return issue
            return await issue_repository.update(
                db,
                issue,
                {
                    "status": IssueStatus.RESOLVED.value,
                    "updated_at": datetime.now(timezone.utc),
                },
            )
        except SQLAlchemyError as exc:
            raise StoreUnavailableError(f"Could not resolve issue: {type(exc).__name__}") from exc


issue_service: IssueService = IssueService()
