"""세션 쿠키 토큰 생성 및 검증 유틸리티 모듈.

Session cookie token creation and verification utility module.
The cookie value is a signed JWT wrapping the server-side session id, so a
tampered or forged cookie is rejected before any database lookup.

JWT Payload Structure:
    {
        "sid": "opaque-session-id",  # 세션 식별자 (login_sessions.id)
        "sub": "member@example.com", # 세션 주체 이메일 (Session principal email)
        "exp": 1234567890,           # 만료 시간 UNIX timestamp (Expiration)
        "type": "session"            # 토큰 유형 (Token type discriminator)
    }
"""

from datetime import datetime, timedelta, timezone
from typing import Any
import jwt

from app.config import settings


def session_expiry() -> datetime:
    """새 세션의 만료 시각을 계산합니다 (현재 UTC + SESSION_EXPIRE_MINUTES)."""
    return datetime.now(timezone.utc) + timedelta(minutes=settings.SESSION_EXPIRE_MINUTES)


def create_session_token(session_id: str, email: str, expires_at: datetime) -> str:
    """세션 쿠키용 서명 토큰을 생성합니다.

    Generate the signed cookie value for a login session.

    Args:
        session_id: 서버 측 세션 식별자 (Server-side session id)
        email: 세션 주체 이메일 (Session principal email)
        expires_at: 세션 만료 일시 (Session expiration timestamp)

    Returns:
        str: 인코딩된 JWT 문자열 (Encoded JWT token string)
    """
    payload: dict[str, Any] = {
        "sid": session_id,
        "sub": email,
        "exp": expires_at,
        "type": "session",
    }
    return jwt.encode(payload, settings.SESSION_SECRET_KEY, algorithm=settings.SESSION_ALGORITHM)


def decode_session_token(token: str, verify_exp: bool = True) -> dict[str, Any]:
    """세션 토큰을 디코딩하고 검증합니다.

    Decode and verify a session cookie value.

    Args:
        token: JWT 토큰 문자열 (Encoded JWT token string)
        verify_exp: 만료 검증 여부, 로그아웃 시 False (Check expiry; False on logout)

    Returns:
        dict[str, Any]: 디코딩된 페이로드 딕셔너리 (Decoded payload dictionary)

    Raises:
        jwt.ExpiredSignatureError: 토큰 만료 시 (When token has expired)
        jwt.InvalidTokenError: 유효하지 않은 토큰 (When token is invalid)
    """
    return jwt.decode(
        token,
        settings.SESSION_SECRET_KEY,
        algorithms=[settings.SESSION_ALGORITHM],
        options={"verify_exp": verify_exp},
    )
