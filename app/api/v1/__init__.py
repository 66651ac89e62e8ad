"""v1 API 라우터 패키지 — 모든 엔드포인트 통합.

v1 API Router package — Aggregates every endpoint into a single router
for inclusion in the FastAPI application.

Included routers:
    - auth: 로그인/로그아웃 (Login and logout)
    - members: 회원가입, 프로필, 탈퇴 (Signup, profile, deactivation)
    - stores: 매장 메뉴 조회 (Store menu listing)
    - orders: 주문 생성/조회 (Order placement and lookup)
"""

from fastapi import APIRouter

from app.api.v1.auth import router as auth_router
from app.api.v1.members import router as members_router
from app.api.v1.orders import router as orders_router
from app.api.v1.orders import stores_router

api_router: APIRouter = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["Auth"])
api_router.include_router(members_router, prefix="/members", tags=["Members"])
api_router.include_router(stores_router, prefix="/stores", tags=["Stores"])
api_router.include_router(orders_router, prefix="/orders", tags=["Orders"])
