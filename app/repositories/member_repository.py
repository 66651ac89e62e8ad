"""회원 레포지토리 — 회원 조회 및 저장 쿼리.

Member Repository — Lookup and persistence queries for members.
Extends BaseRepository with email-based lookups and the
"or raise" finders used by the member lifecycle service.
"""

from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.member import Member
from app.repositories.base import BaseRepository
from app.utils.exceptions import MemberError, MemberErrorCode


class MemberRepository(BaseRepository[Member]):
    """회원 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the members table.
    """

    def __init__(self) -> None:
        """MemberRepository를 초기화합니다.

        Initialize the MemberRepository with the Member model.
        """
        super().__init__(Member)

    async def exists_by_email(self, db: AsyncSession, email: str) -> bool:
        """해당 이메일로 가입된 회원이 있는지 확인합니다.

        Check whether a member is registered with the given email.
        """
        return await self.exists(db, {"email": email})

    async def find_by_email(self, db: AsyncSession, email: str) -> Member | None:
        """이메일로 회원을 조회합니다.

        Retrieve a member by email.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            email: 조회할 이메일 (Email to look up)

        Returns:
            Member | None: 조회된 회원 또는 None (Found member or None)
        """
        query: Select = select(Member).where(Member.email == email)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def find_by_email_or_raise(self, db: AsyncSession, email: str) -> Member:
        """이메일로 회원을 조회하고, 없으면 USER_NOT_FOUND를 발생시킵니다.

        Retrieve a member by email or raise ``USER_NOT_FOUND``.

        Raises:
            MemberError: 회원이 존재하지 않을 때 (USER_NOT_FOUND)
        """
        member: Member | None = await self.find_by_email(db, email)
        if member is None:
            raise MemberError(MemberErrorCode.USER_NOT_FOUND)
        return member

    async def find_by_id_or_raise(self, db: AsyncSession, member_id: int) -> Member:
        """ID로 회원을 조회하고, 없으면 USER_NOT_FOUND를 발생시킵니다.

        Retrieve a member by id or raise ``USER_NOT_FOUND``.

        Raises:
            MemberError: 회원이 존재하지 않을 때 (USER_NOT_FOUND)
        """
        member: Member | None = await self.get_by_id(db, member_id)
        if member is None:
            raise MemberError(MemberErrorCode.USER_NOT_FOUND)
        return member

    async def save(self, db: AsyncSession, db_obj: Member) -> Member:
        """회원을 저장합니다. 이메일 고유 제약 위반은 EMAIL_DUPLICATE로 변환합니다.

        Persist a member. A unique violation on email (concurrent signup with
        the same address) is surfaced as ``EMAIL_DUPLICATE``.

        Raises:
            MemberError: 이메일 중복 시 (EMAIL_DUPLICATE)
        """
        try:
            return await super().save(db, db_obj)
        except IntegrityError as exc:
            await db.rollback()
            raise MemberError(MemberErrorCode.EMAIL_DUPLICATE) from exc


# 싱글턴 인스턴스 — Singleton instance
member_repository: MemberRepository = MemberRepository()
