"""주문 레포지토리 — 주문 조회 및 생성 쿼리.

Order Repository — Lookup and creation queries for orders.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.order import Order
from app.repositories.base import BaseRepository


class OrderRepository(BaseRepository[Order]):
    """주문 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Order)

    async def find_by_member_id(
        self,
        db: AsyncSession,
        member_id: int,
    ) -> list[Order]:
        """회원의 주문 목록을 최신순으로 조회합니다.

        Retrieve a member's orders, newest first.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member_id: 주문 회원 ID (Ordering member id)

        Returns:
            list[Order]: 주문 목록 (List of orders)
        """
        query: Select = (
            select(Order)
            .where(Order.member_id == member_id)
            .order_by(Order.id.desc())
        )
        result = await db.execute(query)
        return list(result.scalars().all())


# 싱글턴 인스턴스 — Singleton instance
order_repository: OrderRepository = OrderRepository()
