"""매장 레포지토리 — 사장님 소유 매장 조회 쿼리.

Store Repository — Read queries over stores owned by a member.
Used by the member service to aggregate an owner's profile.
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.enums import StoreStatus
from app.models.store import Store
from app.repositories.base import BaseRepository


class StoreRepository(BaseRepository[Store]):
    """매장 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the stores table.
    """

    def __init__(self) -> None:
        super().__init__(Store)

    async def count_active_stores_by_owner_id(
        self,
        db: AsyncSession,
        owner_id: int,
    ) -> int:
        """사장님의 영업 중(ACTIVE) 매장 수를 셉니다.

        Count the owner's stores whose status is ACTIVE.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            owner_id: 소유 회원 ID (Owner member id)

        Returns:
            int: 영업 중 매장 수 (Number of active stores)
        """
        query: Select = select(func.count()).select_from(Store).where(
            Store.owner_id == owner_id,
            Store.status == StoreStatus.ACTIVE.value,
        )
        return (await db.execute(query)).scalar() or 0

    async def find_all_by_owner_id(
        self,
        db: AsyncSession,
        owner_id: int,
    ) -> list[Store]:
        """사장님 소유의 모든 매장을 상태와 무관하게 조회합니다.

        Retrieve every store owned by the member, active and inactive alike.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            owner_id: 소유 회원 ID (Owner member id)

        Returns:
            list[Store]: 매장 목록, ID 순 (Stores ordered by id)
        """
        query: Select = select(Store).where(Store.owner_id == owner_id).order_by(Store.id)
        result = await db.execute(query)
        return list(result.scalars().all())


# 싱글턴 인스턴스 — Singleton instance
store_repository: StoreRepository = StoreRepository()
