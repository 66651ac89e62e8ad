"""주문 라우터 — 매장 메뉴 조회, 주문 생성 및 조회 API.

Order Router — Store menu listing, order placement, and order lookup endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_principal
from app.database import get_db
from app.schemas.catalog import MenuResponse, OrderCreate, OrderResponse
from app.services.order_service import order_service
from app.services.session_service import SessionPrincipal

stores_router: APIRouter = APIRouter()
router: APIRouter = APIRouter()


@stores_router.get("/{store_id}/menus", response_model=list[MenuResponse])
async def list_store_menus(
    store_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[MenuResponse]:
    """매장 메뉴 목록 조회 (삭제된 메뉴 제외).

    List a store's menus, excluding deleted ones.
    """
    return await order_service.list_store_menus(db, store_id)


@router.post("", response_model=OrderResponse, status_code=201)
async def place_order(
    data: OrderCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    principal: Annotated[SessionPrincipal, Depends(get_current_principal)],
) -> OrderResponse:
    """주문 생성.

    Place an order for a menu item.
    """
    result: OrderResponse = await order_service.place_order(db, principal, data.menu_id)
    await db.commit()
    return result


@router.get("/me", response_model=list[OrderResponse])
async def list_my_orders(
    db: Annotated[AsyncSession, Depends(get_db)],
    principal: Annotated[SessionPrincipal, Depends(get_current_principal)],
) -> list[OrderResponse]:
    """내 주문 목록 조회 (최신순).

    List the logged-in member's orders, newest first.
    """
    return await order_service.list_my_orders(db, principal)


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    principal: Annotated[SessionPrincipal, Depends(get_current_principal)],
) -> OrderResponse:
    """주문 상세 조회 — 주문자 또는 매장 사장님만.

    Get an order. Visible to the ordering member and the store owner.
    """
    return await order_service.get_order(db, order_id, principal)
