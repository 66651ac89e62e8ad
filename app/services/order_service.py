"""주문 서비스 — 메뉴 조회, 주문 생성 및 조회 비즈니스 로직.

Order Service — Business logic for browsing a store's menus and for placing
and reading orders. Store and menu management stay outside this service.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.enums import MenuStatus, OrderStatus, StoreStatus
from app.models.member import Member
from app.models.order import Order
from app.models.store import Menu, Store
from app.repositories.member_repository import member_repository
from app.repositories.menu_repository import menu_repository
from app.repositories.order_repository import order_repository
from app.repositories.store_repository import store_repository
from app.schemas.catalog import MenuResponse, OrderResponse
from app.services.authorization import Authorizer, active_member_authorizer
from app.services.session_service import SessionPrincipal, session_service
from app.utils.exceptions import BadRequestError, MemberError, MemberErrorCode, NotFoundError


class OrderService:
    """메뉴 및 주문 관련 비즈니스 로직을 처리하는 서비스.

    Service handling menu browsing and order placement.
    """

    def __init__(self, authorizer: Authorizer = active_member_authorizer) -> None:
        self.authorizer: Authorizer = authorizer

    async def list_store_menus(
        self,
        db: AsyncSession,
        store_id: int,
    ) -> list[MenuResponse]:
        """매장의 판매 중인 메뉴 목록을 조회합니다.

        List a store's menus, skipping deleted ones.

        Raises:
            NotFoundError: 매장이 존재하지 않을 때 (Store not found)
        """
        store: Store | None = await store_repository.get_by_id(db, store_id)
        if store is None:
            raise NotFoundError("Store not found")
        menus: list[Menu] = await menu_repository.find_by_store_id(db, store_id)
        return [MenuResponse.from_menu(menu) for menu in menus]

    async def place_order(
        self,
        db: AsyncSession,
        principal: SessionPrincipal | None,
        menu_id: int,
    ) -> OrderResponse:
        """로그인 회원의 주문을 생성합니다.

        Place an order for the logged-in member. The menu must be on sale and
        its store open; the menu name is copied onto the order.

        Raises:
            UnauthorizedError: 로그인 세션이 없을 때 (No session)
            NotFoundError: 메뉴가 존재하지 않을 때 (Menu not found)
            BadRequestError: 삭제된 메뉴이거나 영업 중이 아닌 매장일 때
                             (Deleted menu or inactive store)
        """
        member: Member = await self._login_member(db, principal)

        menu: Menu | None = await menu_repository.get_by_id(db, menu_id)
        if menu is None:
            raise NotFoundError("Menu not found")
        if menu.status == MenuStatus.DELETED:
            raise BadRequestError("Menu is no longer available")

        store: Store | None = await store_repository.get_by_id(db, menu.store_id)
        if store is None or store.status != StoreStatus.ACTIVE:
            raise BadRequestError("Store is not accepting orders")

        order: Order = await order_repository.create(db, {
            "store_id": store.id,
            "member_id": member.id,
            "menu_name": menu.name,
            "status": OrderStatus.ORDERED.value,
        })
        return OrderResponse.from_order(order)

    async def list_my_orders(
        self,
        db: AsyncSession,
        principal: SessionPrincipal | None,
    ) -> list[OrderResponse]:
        """로그인 회원의 주문 목록을 조회합니다 (Newest first)."""
        member: Member = await self._login_member(db, principal)
        orders: list[Order] = await order_repository.find_by_member_id(db, member.id)
        return [OrderResponse.from_order(order) for order in orders]

    async def get_order(
        self,
        db: AsyncSession,
        order_id: int,
        principal: SessionPrincipal | None,
    ) -> OrderResponse:
        """주문 상세를 조회합니다.

        Read an order. Only the ordering member and the store's owner may see it.

        Raises:
            NotFoundError: 주문이 존재하지 않을 때 (Order not found)
            MemberError: 주문자도 매장 사장님도 아닐 때 (PERMISSION_DENIED)
        """
        member: Member = await self._login_member(db, principal)

        order: Order | None = await order_repository.get_by_id(db, order_id)
        if order is None:
            raise NotFoundError("Order not found")

        if order.member_id != member.id:
            store: Store | None = await store_repository.get_by_id(db, order.store_id)
            if store is None or store.owner_id != member.id:
                raise MemberError(MemberErrorCode.PERMISSION_DENIED)

        return OrderResponse.from_order(order)

    async def _login_member(
        self,
        db: AsyncSession,
        principal: SessionPrincipal | None,
    ) -> Member:
        """세션 주체의 회원을 조회하고 권한을 검사합니다."""
        email: str = session_service.get_login_user_email(principal)
        member: Member = await member_repository.find_by_email_or_raise(db, email)
        self.authorizer.check_authorization(member, principal)
        return member


# 싱글턴 인스턴스 — Singleton instance
order_service: OrderService = OrderService()
