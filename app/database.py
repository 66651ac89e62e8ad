"""데이터베이스 엔진 및 세션 설정 모듈.

Database engine and session setup.
Production runs on PostgreSQL through asyncpg; the test suite points
``DATABASE_URL`` at SQLite (aiosqlite), so driver specific options are
applied conditionally.
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


def _engine_options(database_url: str) -> dict[str, Any]:
    """드라이버별 엔진 옵션을 반환합니다.

    Pool sizing and the asyncpg statement cache only apply to PostgreSQL.
    """
    options: dict[str, Any] = {"echo": settings.DEBUG, "pool_pre_ping": True}
    if database_url.startswith("postgresql"):
        options.update(
            pool_size=5,
            max_overflow=10,
            # 트랜잭션 모드 풀러에서 prepared statement 비활성화
            # Transaction-mode poolers cannot keep prepared statements
            connect_args={"statement_cache_size": 0},
        )
    return options


engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    **_engine_options(settings.DATABASE_URL),
)

# expire_on_commit=False: 커밋 후에도 응답 스키마 변환 시 속성 접근 가능
# Routers commit before building responses, so keep attributes loaded
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """모든 ORM 모델의 선언적 베이스 (Declarative base for members, stores, menus, orders, sessions)."""


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """요청 단위 DB 세션을 제공합니다.

    Request-scoped session dependency. Work that the router does not commit
    is discarded when the session closes, so a request that fails part way
    persists nothing.

    Yields:
        AsyncSession: 비동기 세션 (Async session)
    """
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()
