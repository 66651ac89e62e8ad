"""세션 및 비밀번호 유틸리티 테스트.

Session and password utility tests — Cookie token signing, server-side
session resolution, expiry, and bcrypt hashing.
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.config import settings
from app.repositories.session_repository import session_repository
from app.services.session_service import SessionPrincipal, session_service
from app.utils.exceptions import BadRequestError, UnauthorizedError
from app.utils.password import hash_password, password_encoder, verify_password
from app.utils.session_token import create_session_token, decode_session_token


class TestPassword:
    """bcrypt 비밀번호 테스트."""

    def test_hash_and_verify(self):
        hashed = hash_password("pw1234!")
        assert hashed != "pw1234!"
        assert verify_password("pw1234!", hashed)
        assert not verify_password("wrong", hashed)

    def test_salted(self):
        assert hash_password("same") != hash_password("same")

    def test_non_hash_never_matches(self):
        """bcrypt 해시가 아닌 저장값은 항상 불일치."""
        assert not verify_password("deleted_password", "deleted_password")
        assert not password_encoder.matches("anything", "deleted_password")

    def test_hash_rejects_over_72_bytes(self):
        """bcrypt 입력 한도를 넘으면 500 대신 400."""
        with pytest.raises(BadRequestError):
            hash_password("p" * 80)
        assert verify_password("p" * 72, hash_password("p" * 72))

    def test_long_candidate_never_matches(self):
        assert not verify_password("p" * 80, hash_password("p" * 72))


class TestSessionToken:
    """세션 쿠키 토큰 테스트."""

    def test_round_trip_payload(self):
        expires_at = datetime.now(timezone.utc) + timedelta(minutes=5)
        token = create_session_token("sid-1", "a@x.com", expires_at)
        payload = decode_session_token(token)
        assert payload["sid"] == "sid-1"
        assert payload["sub"] == "a@x.com"
        assert payload["type"] == "session"

    def test_expired_token_rejected(self):
        expires_at = datetime.now(timezone.utc) - timedelta(minutes=1)
        token = create_session_token("sid-1", "a@x.com", expires_at)
        with pytest.raises(jwt.ExpiredSignatureError):
            decode_session_token(token)
        assert decode_session_token(token, verify_exp=False)["sid"] == "sid-1"

    def test_foreign_signature_rejected(self):
        token = jwt.encode(
            {"sid": "x", "type": "session"}, "another-secret", algorithm=settings.SESSION_ALGORITHM,
        )
        with pytest.raises(jwt.InvalidTokenError):
            decode_session_token(token)


class TestSessionService:
    """서버 측 세션 테스트."""

    async def test_open_then_resolve(self, db):
        token, principal = await session_service.open(db, "a@x.com")
        resolved = await session_service.resolve(db, token)
        assert resolved == principal
        assert resolved.email == "a@x.com"

    async def test_resolve_missing_or_garbage(self, db):
        assert await session_service.resolve(db, None) is None
        assert await session_service.resolve(db, "") is None
        assert await session_service.resolve(db, "garbage") is None

    async def test_invalidate(self, db):
        token, _ = await session_service.open(db, "a@x.com")
        assert await session_service.invalidate(db, token) is True
        assert await session_service.resolve(db, token) is None
        assert await session_service.invalidate(db, token) is False
        assert await session_service.invalidate(db, None) is False

    async def test_expired_row_is_dropped(self, db):
        """쿠키 서명은 유효하지만 세션 행이 만료된 경우."""
        token, principal = await session_service.open(db, "a@x.com")
        row = await session_repository.get_session(db, principal.session_id)
        row.expires_at = datetime.now(timezone.utc) - timedelta(seconds=1)
        await db.flush()

        assert await session_service.resolve(db, token) is None
        assert await session_repository.get_session(db, principal.session_id) is None

    async def test_rebind_email(self, db):
        token, principal = await session_service.open(db, "a@x.com")
        rebound = await session_service.rebind_email(db, principal, "b@x.com")
        assert rebound.session_id == principal.session_id
        assert (await session_service.resolve(db, token)).email == "b@x.com"

    def test_login_user_email(self):
        principal = SessionPrincipal(email="a@x.com", session_id="s")
        assert session_service.get_login_user_email(principal) == "a@x.com"
        with pytest.raises(UnauthorizedError):
            session_service.get_login_user_email(None)
