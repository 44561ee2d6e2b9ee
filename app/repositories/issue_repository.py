"""이슈 레포지토리.

Issue repository — Handles issues DB queries.
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.issue import Issue, IssueStatus
from app.repositories.base import BaseRepository


class IssueRepository(BaseRepository[Issue]):

    def __init__(self) -> None:
        super().__init__(Issue)

    async def get_by_business_id(self, db: AsyncSession, business_id: str) -> Issue | None:
        return await self.get_one_by(db, "business_id", business_id)

    async def list_all(self, db: AsyncSession) -> Sequence[Issue]:
        """전체 이슈 — 생성순 (All issues, oldest first)."""
        return await self.get_all(db, order_by=Issue.created_at)

    async def list_resolved(self, db: AsyncSession) -> Sequence[Issue]:
        return await self.get_all(
            db,
            filters={"status": IssueStatus.RESOLVED.value},
            order_by=Issue.updated_at,
        )


issue_repository: IssueRepository = IssueRepository()
