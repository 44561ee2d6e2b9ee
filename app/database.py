"""데이터베이스 엔진 및 세션 설정 모듈.

Database engine and session configuration module.
The engine is not created at import time: the application lifespan opens it
at startup, keeps it on ``app.state`` and disposes it at shutdown. Request
handlers receive their own session through the ``get_db`` dependency.
"""

from collections.abc import AsyncGenerator
from typing import Any

from fastapi import Request
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


class Base(DeclarativeBase):
    """SQLAlchemy 선언적 베이스 클래스.

    Declarative base class for all ORM models.
    All models inherit from this class to register with the metadata.
    """

    pass


def create_engine_from_settings(database_url: str | None = None) -> AsyncEngine:
    """설정값으로 비동기 엔진을 생성합니다.

    Build the async engine from settings.
    Pool sizing only applies to server databases; SQLite uses its own pool.

    Args:
        database_url: 연결 문자열, None이면 settings.DATABASE_URL 사용
                      (Connection string; defaults to settings.DATABASE_URL)

    Returns:
        AsyncEngine: 비동기 데이터베이스 엔진 (Async database engine)
    """
    url = make_url(database_url or settings.DATABASE_URL)
    options: dict[str, Any] = {"echo": settings.DEBUG}

    if url.get_backend_name() != "sqlite":
        # pool_pre_ping=True: 커넥션 풀에서 꺼낸 연결의 유효성을 사전 확인 (Validates connections before use)
        options.update(
            pool_pre_ping=True,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
        )

    return create_async_engine(url, **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """세션 팩토리 생성.

    expire_on_commit=False: 커밋 후에도 객체 속성 접근 가능 (Allows attribute access after commit without refresh)
    """
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """요청마다 비동기 데이터베이스 세션을 생성하고 요청 종료 시 닫습니다.

    FastAPI dependency that yields an async database session taken from the
    session factory stored on ``app.state`` by the lifespan handler.
    The session is automatically closed after the request completes,
    ensuring no connection leaks.

    Yields:
        AsyncSession: SQLAlchemy 비동기 세션 인스턴스 (Async session instance)
    """
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.close()
