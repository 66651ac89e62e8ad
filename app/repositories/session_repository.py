"""세션 레포지토리 — 로그인 세션 CRUD.

Session Repository — Handles login session row lifecycle.
Provides database operations backing the server-side session store.
"""

from datetime import datetime

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.session import LoginSession


class SessionRepository:
    """로그인 세션 관련 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling login session database queries.
    """

    async def create_session(
        self,
        db: AsyncSession,
        session_id: str,
        email: str,
        expires_at: datetime,
    ) -> LoginSession:
        """새 로그인 세션을 생성합니다.

        Create a new login session record.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            session_id: 세션 식별자 (Opaque session id)
            email: 세션 주체 이메일 (Session principal email)
            expires_at: 세션 만료 일시 (Session expiration timestamp)

        Returns:
            LoginSession: 생성된 세션 레코드 (Created session record)
        """
        login_session: LoginSession = LoginSession(
            id=session_id,
            email=email,
            expires_at=expires_at,
        )
        db.add(login_session)
        await db.flush()
        await db.refresh(login_session)
        return login_session

    async def get_session(
        self,
        db: AsyncSession,
        session_id: str,
    ) -> LoginSession | None:
        """세션 식별자로 세션 레코드를 조회합니다.

        Retrieve a session record by its id.
        """
        query: Select = select(LoginSession).where(LoginSession.id == session_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def delete_session(
        self,
        db: AsyncSession,
        session_id: str,
    ) -> bool:
        """세션을 삭제합니다.

        Delete a session by its id.

        Returns:
            bool: 삭제 성공 여부 (Whether a session was deleted)
        """
        login_session: LoginSession | None = await self.get_session(db, session_id)
        if login_session is None:
            return False

        await db.delete(login_session)
        await db.flush()
        return True

    async def update_email(
        self,
        db: AsyncSession,
        session_id: str,
        email: str,
    ) -> None:
        """세션 주체 이메일을 변경합니다 (회원 이메일 변경 시).

        Point an existing session at the member's new email.
        """
        login_session: LoginSession | None = await self.get_session(db, session_id)
        if login_session is not None:
            login_session.email = email
            await db.flush()

    async def delete_expired(
        self,
        db: AsyncSession,
        now: datetime,
    ) -> None:
        """만료된 세션을 일괄 삭제합니다.

        Delete every session whose expiration is before ``now``.
        """
        stmt = delete(LoginSession).where(LoginSession.expires_at < now)
        await db.execute(stmt)
        await db.flush()


# 싱글턴 인스턴스 — Singleton instance
session_repository: SessionRepository = SessionRepository()
