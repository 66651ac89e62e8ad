"""로그인 세션 모델 — 서버 측 세션 저장소.

Login Session model — Server-side session store.
Each row maps an opaque session id (carried in a signed cookie) to the
authenticated member's email. Deleting the row invalidates the session.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class LoginSession(Base):
    """로그인 세션 테이블.

    Login session table backing cookie-based authentication.

    Attributes:
        id: 세션 식별자 (Random opaque session id)
        email: 세션 주체 이메일 (Session principal email)
        expires_at: 만료 일시 (Expiration timestamp)
        created_at: 생성 일시 (Creation timestamp)
    """

    __tablename__ = "login_sessions"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
