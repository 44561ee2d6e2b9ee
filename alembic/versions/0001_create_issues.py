"""create_issues

Revision ID: 0001_create_issues
Revises:
Create Date: 2026-10-19 10:00:00.000000

이슈(issues) 테이블 생성.
business_id는 외부 노출 식별자 (unique), id는 내부 식별자.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001_create_issues"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "issues",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("business_id", sa.String(36), nullable=False),
        sa.Column("assignee", sa.String(255), nullable=False),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("severity", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), server_default="new", nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_issues_business_id", "issues", ["business_id"], unique=True)
    op.create_index("ix_issues_assignee", "issues", ["assignee"])
    op.create_index("ix_issues_status", "issues", ["status"])


def downgrade() -> None:
    op.drop_index("ix_issues_status")
    op.drop_index("ix_issues_assignee")
    op.drop_index("ix_issues_business_id")
    op.drop_table("issues")
