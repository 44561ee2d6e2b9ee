"""이슈 SQLAlchemy ORM 모델 정의.

Issue SQLAlchemy ORM model definition.
An issue is created as "new" and can only move to "resolved"; it is never deleted.

Tables:
    - issues: 이슈 (Tracked issues with severity, status and assignee)
"""

import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Severity(str, enum.Enum):
    """심각도 — Issue severity levels."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    SEVERE = "Severe"


class IssueStatus(str, enum.Enum):
    """이슈 상태 — 단방향 전이: new → resolved (One-way transition)."""

    NEW = "new"
    RESOLVED = "resolved"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Issue(Base):
    """이슈 모델 — 담당자에게 배정된 버그/작업 보고.

    Issue model — A bug report or unit of work reported by (and assigned to) one person.
    The assignee field names both the reporter and the person responsible for it.

    Attributes:
        id: 내부 식별자 UUID (Storage identity, never exposed through the API)
        business_id: 외부 노출 식별자 (Externally visible unique id, immutable)
        assignee: 담당자 이름 (Assignee display name)
        title: 이슈 제목 (Issue title, max 500 chars)
        description: 이슈 설명 (Issue description)
        severity: 심각도 (Low, Medium, High, Severe)
        status: 상태 (new, resolved)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp, refreshed on resolution)
    """

    __tablename__ = "issues"

    # 내부 고유 식별자 — Storage identity (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 비즈니스 식별자 — Assigned once at creation by the service
    business_id: Mapped[str] = mapped_column(String(36), unique=True, index=True, nullable=False)
    # 담당자 — Reporter/assignee display name
    assignee: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    # 심각도 — Severity enum value
    severity: Mapped[str] = mapped_column(String(20), nullable=False)
    # 상태 — "new" → "resolved"
    status: Mapped[str] = mapped_column(String(20), index=True, default=IssueStatus.NEW.value, nullable=False)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)
