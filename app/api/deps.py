"""FastAPI 의존성 주입 모듈 — 세션 기반 인증.

FastAPI dependency injection module — Session-based authentication.
Provides reusable dependencies that turn the session cookie into an explicit
``SessionPrincipal`` handed to services.

Authentication Flow:
    1. 로그인 성공 시 서버가 서명된 세션 쿠키를 발급
       (Login sets a signed session cookie)
    2. 클라이언트가 이후 요청마다 쿠키를 전송
       (Client sends the cookie on every request)
    3. decode_session_token()이 서명/만료를 검증하고 세션 ID를 추출
       (Signature and expiry are verified, session id extracted)
    4. login_sessions 테이블에서 세션 주체 이메일을 조회
       (Principal email is loaded from the login_sessions table)
"""

from typing import Annotated

from fastapi import Cookie, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.services.session_service import SessionPrincipal, session_service
from app.utils.exceptions import UnauthorizedError


async def get_session_token(
    session_token: Annotated[str | None, Cookie(alias=settings.SESSION_COOKIE_NAME)] = None,
) -> str | None:
    """요청 쿠키에서 세션 토큰을 꺼냅니다 (Raw session cookie value, if any)."""
    return session_token


async def get_optional_principal(
    db: Annotated[AsyncSession, Depends(get_db)],
    session_token: Annotated[str | None, Depends(get_session_token)],
) -> SessionPrincipal | None:
    """세션 주체를 반환합니다. 로그인하지 않았으면 None.

    Return the current principal, or None when there is no valid session.
    """
    return await session_service.resolve(db, session_token)


async def get_current_principal(
    principal: Annotated[SessionPrincipal | None, Depends(get_optional_principal)],
) -> SessionPrincipal:
    """로그인된 세션 주체를 반환합니다. 없으면 401.

    Return the current principal.

    Raises:
        UnauthorizedError: 유효한 세션이 없을 때 (No valid session)
    """
    if principal is None:
        raise UnauthorizedError("Login required")
    return principal
