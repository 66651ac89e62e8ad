"""테스트 인프라 — 임시 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — Temporary SQLite DB, session, and httpx client fixtures.
Each test gets a fresh database file under pytest's tmp_path, so no
external database server is needed.
"""

import os
from collections.abc import AsyncGenerator
from pathlib import Path

# 앱 임포트 전에 설정 — Must be set before the app (and its engine) is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("AXIOM_API_TOKEN", "")
os.environ.setdefault("AXIOM_DATASET", "")

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.database import Base, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models import *  # noqa: F401,F403,E402 — register all models with metadata
from app.models.enums import MemberRole, MemberStatus, MenuStatus, StoreStatus  # noqa: E402
from app.models.member import Member  # noqa: E402
from app.models.store import Menu, Store  # noqa: E402
from app.utils.password import hash_password  # noqa: E402

MEMBERS_URL = "/api/v1/members"
AUTH_URL = "/api/v1/auth"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진 — 임시 SQLite 파일에 스키마를 생성합니다."""
    eng = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
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
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def make_member(
    db: AsyncSession,
    email: str,
    password: str,
    name: str = "Tester",
    role: MemberRole = MemberRole.USER,
) -> Member:
    """bcrypt 해시 비밀번호로 회원을 생성합니다."""
    member = Member(
        name=name,
        email=email,
        password=hash_password(password),
        role=role.value,
        status=MemberStatus.ACTIVE.value,
    )
    db.add(member)
    await db.flush()
    await db.refresh(member)
    return member


async def make_store(
    db: AsyncSession,
    owner: Member,
    name: str,
    status: StoreStatus = StoreStatus.ACTIVE,
) -> Store:
    """사장님 소유 매장을 생성합니다."""
    store = Store(owner_id=owner.id, name=name, status=status.value, min_order_price=10000)
    db.add(store)
    await db.flush()
    await db.refresh(store)
    return store


async def make_menu(
    db: AsyncSession,
    store: Store,
    name: str,
    price: int = 12000,
    status: MenuStatus = MenuStatus.ACTIVE,
) -> Menu:
    """매장 메뉴를 생성합니다."""
    menu = Menu(store_id=store.id, name=name, price=price, status=status.value)
    db.add(menu)
    await db.flush()
    await db.refresh(menu)
    return menu


@pytest_asyncio.fixture
async def user_member(db: AsyncSession) -> Member:
    """일반 회원(USER)을 생성합니다."""
    return await make_member(db, "user@test.com", "user123!", name="Test User")


@pytest_asyncio.fixture
async def other_member(db: AsyncSession) -> Member:
    """다른 일반 회원을 생성합니다."""
    return await make_member(db, "other@test.com", "other123!", name="Other User")


@pytest_asyncio.fixture
async def owner_member(db: AsyncSession) -> Member:
    """사장님 회원(OWNER)을 생성합니다."""
    return await make_member(db, "owner@test.com", "owner123!", name="Test Owner", role=MemberRole.OWNER)


@pytest_asyncio.fixture
async def store(db: AsyncSession, owner_member: Member) -> Store:
    """영업 중인 테스트 매장을 생성합니다."""
    return await make_store(db, owner_member, "Chicken House")


async def login(client: AsyncClient, email: str, password: str) -> None:
    """로그인하여 클라이언트에 세션 쿠키를 저장합니다."""
    res = await client.post(f"{AUTH_URL}/login", json={"email": email, "password": password})
    assert res.status_code == 200, res.text
