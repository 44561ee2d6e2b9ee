"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, and httpx client fixtures.
Each test gets a fresh engine (StaticPool keeps the single in-memory
connection alive), so no data leaks between tests.
"""

import uuid
from collections.abc import AsyncGenerator
from datetime import datetime, timezone

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import *  # noqa: F401,F403 — register all models with metadata
from app.models.issue import Issue

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

ISSUES_URL = "/api/issues"
CHARTS_URL = "/api/charts"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 매 테스트마다 스키마를 새로 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
def issue_payload(assignee: str = "Alice", severity: str = "High", **overrides) -> dict:
    payload = {
        "assignee": assignee,
        "title": "Login button does nothing",
        "description": "Clicking login on the start page has no effect.",
        "severity": severity,
    }
    payload.update(overrides)
    return payload


async def create_issue(client: AsyncClient, **kwargs) -> dict:
    res = await client.post(ISSUES_URL, json=issue_payload(**kwargs))
    assert res.status_code == 201, res.text
    return res.json()


async def insert_issue(
    db: AsyncSession,
    assignee: str,
    severity: str = "Low",
    status: str = "new",
    updated_at: datetime | None = None,
) -> Issue:
    """API를 거치지 않고 이슈를 직접 저장 — updated_at을 지정할 때 사용."""
    stamp = updated_at or datetime.now(timezone.utc)
    issue = Issue(
        business_id=str(uuid.uuid4()),
        assignee=assignee,
        title=f"{assignee} issue",
        description="Inserted by test",
        severity=severity,
        status=status,
        created_at=stamp,
        updated_at=stamp,
    )
    db.add(issue)
    await db.flush()
    return issue
