"""주문 모델 — 회원이 매장 메뉴를 주문한 기록.

Order model — A member's order of a store's menu item.
The menu name is copied onto the order so later menu edits do not rewrite history.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.enums import OrderStatus


class Order(Base):
    """주문 테이블.

    Order table.

    Attributes:
        id: 고유 식별자 (Auto-increment identifier)
        store_id: 주문 매장 FK (Store foreign key)
        member_id: 주문 회원 FK (Ordering member foreign key)
        menu_name: 주문 시점의 메뉴 이름 (Menu name snapshot)
        status: 주문 상태 (Order status)
        created_at: 생성 일시 (Creation timestamp)
        modified_at: 수정 일시 (Last update timestamp)
    """

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    store_id: Mapped[int] = mapped_column(Integer, ForeignKey("stores.id"), nullable=False, index=True)
    member_id: Mapped[int] = mapped_column(Integer, ForeignKey("members.id"), nullable=False, index=True)
    menu_name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[OrderStatus] = mapped_column(String(20), nullable=False, default=OrderStatus.ORDERED.value)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    modified_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    store = relationship("Store", back_populates="orders")
    member = relationship("Member", back_populates="orders")
