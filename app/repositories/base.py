"""공통 레포지토리 — 정수 PK 모델의 조회/저장 기본 연산.

Common repository — Lookup and persistence primitives shared by the member,
store, menu, and order repositories. Every method only flushes; committing
is left to the router that owns the request.

Usage:
    class MenuRepository(BaseRepository[Menu]):
        def __init__(self) -> None:
            super().__init__(Menu)
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import Select, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """정수 ID를 가진 모델용 제네릭 레포지토리.

    Generic repository for models keyed by an integer ``id``.

    Attributes:
        model: 관리 대상 모델 클래스 (Managed model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> ModelType | None:
        """기본 키로 레코드를 조회합니다. 없으면 None.

        Fetch a row by primary key, or None when it does not exist.
        """
        query: Select = select(self.model).where(self.model.id == record_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def exists(
        self,
        db: AsyncSession,
        filters: dict[str, Any],
    ) -> bool:
        """컬럼 값이 모두 일치하는 레코드가 있는지 확인합니다.

        Return True when at least one row matches every ``column == value`` pair.
        """
        conditions = [getattr(self.model, column) == value for column, value in filters.items()]
        query: Select = select(exists().where(*conditions))
        return bool((await db.execute(query)).scalar())

    async def create(
        self,
        db: AsyncSession,
        values: dict[str, Any],
    ) -> ModelType:
        """값 딕셔너리로 새 레코드를 만들어 저장합니다."""
        return await self.save(db, self.model(**values))

    async def save(
        self,
        db: AsyncSession,
        db_obj: ModelType,
    ) -> ModelType:
        """신규 또는 변경된 레코드를 flush하고 DB 기본값을 다시 읽어옵니다.

        Flush a new or modified row and reload generated columns
        (id, timestamps).
        """
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj
