"""메뉴 및 주문 Pydantic 스키마 정의.

Menu and Order Pydantic schema definitions.
Field mapping mirrors the public menu/order views of the delivery API.
"""

from datetime import datetime

from pydantic import BaseModel

from app.models.enums import MenuStatus, OrderStatus
from app.models.order import Order
from app.models.store import Menu


class MenuResponse(BaseModel):
    """메뉴 응답 스키마.

    Attributes:
        menu_id: 메뉴 ID (Menu identifier)
        name: 메뉴 이름 (Menu name)
        price: 가격 (Price)
        menu_status: 메뉴 상태 (Menu status)
        created_at: 생성 일시 (Creation timestamp)
        modified_at: 수정 일시 (Last update timestamp)
    """

    menu_id: int
    name: str
    price: int
    menu_status: MenuStatus
    created_at: datetime
    modified_at: datetime

    @classmethod
    def from_menu(cls, menu: Menu) -> "MenuResponse":
        return cls(
            menu_id=menu.id,
            name=menu.name,
            price=menu.price,
            menu_status=menu.status,
            created_at=menu.created_at,
            modified_at=menu.modified_at,
        )


class OrderCreate(BaseModel):
    """주문 생성 요청 스키마 (Order placement request)."""

    menu_id: int


class OrderResponse(BaseModel):
    """주문 응답 스키마.

    Attributes:
        id: 주문 ID (Order identifier)
        store_id: 매장 ID (Store identifier)
        user_id: 주문 회원 ID (Ordering member identifier)
        menu_name: 주문 메뉴 이름 (Ordered menu name)
        status: 주문 상태 (Order status)
        created_at: 생성 일시 (Creation timestamp)
        modified_at: 수정 일시 (Last update timestamp)
    """

    id: int
    store_id: int
    user_id: int
    menu_name: str
    status: OrderStatus
    created_at: datetime
    modified_at: datetime

    @classmethod
    def from_order(cls, order: Order) -> "OrderResponse":
        return cls(
            id=order.id,
            store_id=order.store_id,
            user_id=order.member_id,
            menu_name=order.menu_name,
            status=order.status,
            created_at=order.created_at,
            modified_at=order.modified_at,
        )
