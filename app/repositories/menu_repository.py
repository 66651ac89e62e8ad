"""메뉴 레포지토리 — 매장 메뉴 조회 쿼리.

Menu Repository — Read queries over a store's menu items.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.enums import MenuStatus
from app.models.store import Menu
from app.repositories.base import BaseRepository


class MenuRepository(BaseRepository[Menu]):
    """메뉴 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Menu)

    async def find_by_store_id(
        self,
        db: AsyncSession,
        store_id: int,
        include_deleted: bool = False,
    ) -> list[Menu]:
        """매장의 메뉴 목록을 조회합니다.

        Retrieve a store's menus ordered by id. Deleted menus are skipped
        unless ``include_deleted`` is set.
        """
        query: Select = select(Menu).where(Menu.store_id == store_id)
        if not include_deleted:
            query = query.where(Menu.status != MenuStatus.DELETED.value)
        result = await db.execute(query.order_by(Menu.id))
        return list(result.scalars().all())


# 싱글턴 인스턴스 — Singleton instance
menu_repository: MenuRepository = MenuRepository()
