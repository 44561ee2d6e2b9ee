"""이슈 Pydantic 스키마.

Issue request/response schemas.
"""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.models.issue import IssueStatus, Severity


class IssueCreate(BaseModel):
    """이슈 생성 요청 스키마.

    The dashboard client sends the assignee as ``name``; both keys are accepted.
    """

    assignee: str = Field(min_length=1, validation_alias=AliasChoices("assignee", "name"))
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    severity: Severity


class IssueResponse(BaseModel):
    """이슈 응답 스키마 — API 와이어 이름 사용 (camelCase wire names)."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    business_id: str = Field(serialization_alias="businessId")
    assignee: str
    title: str
    description: str
    severity: Severity
    status: IssueStatus
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")
