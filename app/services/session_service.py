"""세션 서비스 — 쿠키 기반 로그인 세션의 생성, 조회, 무효화.

Session Service — Opens, resolves, and invalidates cookie-backed login sessions.
The authenticated principal is handed to services explicitly as a
``SessionPrincipal`` rather than looked up from ambient request state.
"""

import secrets
from dataclasses import dataclass
from datetime import datetime, timezone

import jwt
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.session import LoginSession
from app.repositories.session_repository import session_repository
from app.utils.exceptions import UnauthorizedError
from app.utils.session_token import create_session_token, decode_session_token, session_expiry


@dataclass(frozen=True)
class SessionPrincipal:
    """현재 세션의 인증 주체.

    Authenticated principal of the current session.

    Attributes:
        email: 로그인 회원 이메일 (Logged-in member's email)
        session_id: 서버 측 세션 식별자 (Server-side session id)
    """

    email: str
    session_id: str


def _as_utc(value: datetime) -> datetime:
    # SQLite는 tzinfo 없이 반환 — SQLite returns naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SessionService:
    """로그인 세션 관련 비즈니스 로직을 처리하는 서비스.

    Service handling the login session lifecycle.
    """

    async def open(
        self,
        db: AsyncSession,
        email: str,
    ) -> tuple[str, SessionPrincipal]:
        """회원 이메일을 주체로 하는 새 세션을 생성합니다.

        Open a new session keyed on the member's email.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            email: 세션 주체 이메일 (Principal email)

        Returns:
            tuple[str, SessionPrincipal]: (서명된 쿠키 값, 세션 주체)
                                          (Signed cookie value, principal)
        """
        now: datetime = datetime.now(timezone.utc)
        # 만료 세션 정리 — Clean up expired sessions to prevent accumulation
        await session_repository.delete_expired(db, now)

        session_id: str = secrets.token_urlsafe(32)
        expires_at: datetime = session_expiry()
        await session_repository.create_session(db, session_id, email, expires_at)

        token: str = create_session_token(session_id, email, expires_at)
        return token, SessionPrincipal(email=email, session_id=session_id)

    async def resolve(
        self,
        db: AsyncSession,
        token: str | None,
    ) -> SessionPrincipal | None:
        """쿠키 값으로 현재 세션 주체를 조회합니다.

        Resolve the principal for a cookie value.
        Returns None for a missing, tampered, expired, or invalidated session.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            token: 세션 쿠키 값 (Session cookie value, may be None)

        Returns:
            SessionPrincipal | None: 세션 주체 또는 None (Principal or None)
        """
        session_id: str | None = self._session_id(token)
        if session_id is None:
            return None

        login_session: LoginSession | None = await session_repository.get_session(db, session_id)
        if login_session is None:
            return None

        if _as_utc(login_session.expires_at) < datetime.now(timezone.utc):
            await session_repository.delete_session(db, session_id)
            return None

        return SessionPrincipal(email=login_session.email, session_id=login_session.id)

    def get_login_user_email(self, principal: SessionPrincipal | None) -> str:
        """세션 주체의 이메일을 반환합니다. 세션이 없으면 401을 발생시킵니다.

        Return the principal's email.

        Raises:
            UnauthorizedError: 로그인 세션이 없을 때 (No authenticated session)
        """
        if principal is None:
            raise UnauthorizedError("Login required")
        return principal.email

    async def invalidate(
        self,
        db: AsyncSession,
        token: str | None,
    ) -> bool:
        """세션이 존재하면 무효화합니다. 없으면 아무 것도 하지 않습니다.

        Invalidate the session if one exists; a no-op otherwise.

        Returns:
            bool: 세션이 삭제되었는지 여부 (Whether a session was removed)
        """
        session_id: str | None = self._session_id(token, verify_exp=False)
        if session_id is None:
            return False
        return await session_repository.delete_session(db, session_id)

    async def rebind_email(
        self,
        db: AsyncSession,
        principal: SessionPrincipal,
        email: str,
    ) -> SessionPrincipal:
        """회원 이메일 변경 후 세션 주체를 새 이메일로 갱신합니다.

        Keep the session valid after the member changed their own email.
        """
        await session_repository.update_email(db, principal.session_id, email)
        return SessionPrincipal(email=email, session_id=principal.session_id)

    def _session_id(self, token: str | None, verify_exp: bool = True) -> str | None:
        """쿠키 값의 서명을 검증하고 세션 식별자를 추출합니다."""
        if not token:
            return None
        try:
            payload: dict = decode_session_token(token, verify_exp=verify_exp)
        except jwt.InvalidTokenError:
            return None
        if payload.get("type") != "session":
            return None
        return payload.get("sid")


# 싱글턴 인스턴스 — Singleton instance
session_service: SessionService = SessionService()
