"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    enums: 역할 및 상태 열거형 (Role and status enumerations)
    member: 회원 (Member accounts)
    store: 매장 및 메뉴 (Stores and menus)
    order: 주문 (Orders)
    session: 로그인 세션 (Server-side login sessions)
"""

from app.models.enums import MemberRole, MemberStatus, MenuStatus, OrderStatus, StoreStatus
from app.models.member import Member
from app.models.store import Store, Menu
from app.models.order import Order
from app.models.session import LoginSession

__all__ = [
    "MemberRole", "MemberStatus", "MenuStatus", "OrderStatus", "StoreStatus",
    "Member",
    "Store", "Menu",
    "Order",
    "LoginSession",
]
