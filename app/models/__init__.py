"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and test
schema creation.

Modules:
    issue: 이슈, 심각도, 상태 (Issue, Severity, IssueStatus)
"""

from app.models.issue import Issue, IssueStatus, Severity

__all__ = ["Issue", "IssueStatus", "Severity"]
