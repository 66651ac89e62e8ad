"""매장 및 메뉴 관련 SQLAlchemy ORM 모델 정의.

Store and Menu SQLAlchemy ORM model definitions.
Stores are owned by OWNER members; each store publishes a menu list.

Tables:
    - stores: 사장님 소유 매장 (Stores owned by an OWNER member)
    - menus: 매장 메뉴 (Menu items of a store)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.enums import MenuStatus, StoreStatus


class Store(Base):
    """매장 모델 — 사장님(OWNER) 소유의 가게.

    Store model — A shop owned by an OWNER member.
    The member core only reads stores to build owner profile summaries.

    Attributes:
        id: 고유 식별자 (Auto-increment identifier)
        owner_id: 소유 회원 FK (Owner member foreign key)
        name: 매장 이름 (Store name)
        status: 영업 상태 ACTIVE/INACTIVE (Operating status)
        min_order_price: 최소 주문 금액 (Minimum order amount)
        open_time: 오픈 시간 "HH:MM" (Opening time)
        close_time: 마감 시간 "HH:MM" (Closing time)
        created_at: 생성 일시 UTC (Creation timestamp)
        modified_at: 수정 일시 UTC (Last update timestamp)
    """

    __tablename__ = "stores"

    # 매장 고유 식별자 — Store unique identifier
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 소유 회원 FK — Owner member
    owner_id: Mapped[int] = mapped_column(Integer, ForeignKey("members.id"), nullable=False, index=True)
    # 매장 이름 — Store display name
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 영업 상태 — ACTIVE(영업 중) / INACTIVE(폐업)
    status: Mapped[StoreStatus] = mapped_column(String(20), nullable=False, default=StoreStatus.ACTIVE.value)
    # 최소 주문 금액 — Minimum order price (KRW)
    min_order_price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    open_time: Mapped[str | None] = mapped_column(String(5), nullable=True)
    close_time: Mapped[str | None] = mapped_column(String(5), nullable=True)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    modified_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    owner = relationship("Member", back_populates="stores")
    menus = relationship("Menu", back_populates="store", cascade="all, delete-orphan")
    orders = relationship("Order", back_populates="store")


class Menu(Base):
    """메뉴 모델 — 매장에서 판매하는 음식.

    Menu model — A dish sold by a store.

    Attributes:
        id: 고유 식별자 (Auto-increment identifier)
        store_id: 소속 매장 FK (Parent store foreign key)
        name: 메뉴 이름 (Menu name)
        price: 가격 (Price in KRW)
        status: 메뉴 상태 ACTIVE/DELETED (Menu status)
        created_at: 생성 일시 UTC (Creation timestamp)
        modified_at: 수정 일시 UTC (Last update timestamp)
    """

    __tablename__ = "menus"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 소속 매장 FK — Parent store (CASCADE: 매장 삭제 시 메뉴도 삭제)
    store_id: Mapped[int] = mapped_column(Integer, ForeignKey("stores.id", ondelete="CASCADE"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[MenuStatus] = mapped_column(String(20), nullable=False, default=MenuStatus.ACTIVE.value)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    modified_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    store = relationship("Store", back_populates="menus")
