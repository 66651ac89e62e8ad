"""회원 관련 SQLAlchemy ORM 모델 정의.

Member SQLAlchemy ORM model definition.
A member is either a regular customer (USER) or a store owner (OWNER).
Accounts are never physically removed; deactivation anonymises the row
and flips its status to DELETED.

Tables:
    - members: 회원 계정 (Member accounts)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.enums import MemberRole, MemberStatus


class Member(Base):
    """회원 모델 — 시스템 사용자 계정 정보.

    Member model — Registered account information.
    Email is globally unique and doubles as the session principal.

    Attributes:
        id: 고유 식별자 (Auto-increment integer identifier)
        name: 표시 이름 (Display name)
        email: 이메일, 로그인 아이디 (Email, used as login identifier)
        password: bcrypt 해시된 비밀번호 (bcrypt-hashed password, never plaintext)
        role: 회원 역할 USER/OWNER (Member role, immutable)
        status: 계정 상태 ACTIVE/DELETED (Account status)
        created_at: 생성 일시 UTC (Creation timestamp)
        modified_at: 수정 일시 UTC (Last update timestamp)

    Relationships:
        stores: 소유 매장 목록 (Stores owned by this member)
        orders: 주문 목록 (Orders placed by this member)
    """

    __tablename__ = "members"

    # 회원 고유 식별자 — Member unique identifier (auto-increment)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 표시 이름 — Display name (탈퇴 시 고정 문구로 덮어씀, overwritten on deactivation)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    # 이메일 — Login email (전역 고유, globally unique)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    # 비밀번호 해시 — bcrypt hashed password (평문 저장 금지, never store plaintext)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    # 역할 — USER(일반 회원) / OWNER(사장님)
    role: Mapped[MemberRole] = mapped_column(String(20), nullable=False)
    # 계정 상태 — ACTIVE → DELETED
    status: Mapped[MemberStatus] = mapped_column(String(20), nullable=False, default=MemberStatus.ACTIVE.value)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    modified_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    stores = relationship("Store", back_populates="owner")
    orders = relationship("Order", back_populates="member")
