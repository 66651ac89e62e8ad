"""회원 비밀번호 해싱 및 검증 유틸리티.

Member password hashing and verification with bcrypt.
Signup and password changes store only the salted hash; login, update, and
deactivation compare the submitted password against it.
"""

import bcrypt

from app.utils.exceptions import BadRequestError

# bcrypt 입력 한도 (bytes) — bcrypt only accepts up to 72 bytes of input
MAX_PASSWORD_BYTES: int = 72


def password_too_long(password: str) -> bool:
    """UTF-8 인코딩 기준 bcrypt 한도를 넘는지 확인합니다."""
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


def hash_password(password: str) -> str:
    """평문 비밀번호를 salt가 포함된 bcrypt 해시로 변환합니다.

    Args:
        password: 평문 비밀번호 (Plain text password)

    Returns:
        str: bcrypt 해시 문자열 (Bcrypt hash string)

    Raises:
        BadRequestError: 72바이트를 넘는 비밀번호 (Password longer than 72 bytes)
    """
    if password_too_long(password):
        raise BadRequestError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """평문 비밀번호와 bcrypt 해시를 비교 검증합니다.

    Verify a plain text password against a bcrypt hash.
    Uses constant-time comparison to prevent timing attacks.
    A stored value that is not a bcrypt hash (e.g. the sentinel written on
    account deactivation) never matches.
    A candidate longer than 72 bytes never matches either, whatever the
    installed bcrypt release does with over-long input.

    Args:
        plain_password: 검증할 평문 비밀번호 (Plain text password to verify)
        hashed_password: 저장된 bcrypt 해시 (Stored bcrypt hash to compare against)

    Returns:
        bool: 일치하면 True, 불일치하면 False (True if password matches hash)
    """
    if password_too_long(plain_password):
        return False
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"), hashed_password.encode("utf-8")
        )
    except ValueError:
        # 잘못된 salt — 해시가 아닌 값 (Invalid salt: stored value is not a bcrypt hash)
        return False


class BcryptPasswordEncoder:
    """bcrypt 기반 비밀번호 인코더 — encode/matches 계약 구현.

    Password encoder implementing the ``encode`` / ``matches`` contract
    consumed by the member service.
    """

    def encode(self, raw_password: str) -> str:
        return hash_password(raw_password)

    def matches(self, raw_password: str, encoded_password: str) -> bool:
        return verify_password(raw_password, encoded_password)


# 싱글턴 인스턴스 — Singleton instance
password_encoder: BcryptPasswordEncoder = BcryptPasswordEncoder()
