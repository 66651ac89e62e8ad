"""회원 서비스 — 회원가입, 로그인/로그아웃, 프로필 조회/수정, 회원 탈퇴 비즈니스 로직.

Member Service — Business logic for the member lifecycle:
signup, login/logout, profile lookup, profile update, and deactivation.

Every failure aborts the operation with a ``MemberError`` before anything is
persisted; ``save`` is only reached once all checks have passed.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.enums import MemberRole, MemberStatus
from app.models.member import Member
from app.models.store import Store
from app.repositories.member_repository import member_repository
from app.repositories.store_repository import store_repository
from app.schemas.auth import LoginRequest, LogoutResponse
from app.schemas.member import (
    MemberProfile,
    MemberResponse,
    MemberUpdateRequest,
    OwnerProfileResponse,
    SignupRequest,
    StoreDetail,
    UserProfileResponse,
)
from app.services.authorization import Authorizer, active_member_authorizer
from app.services.session_service import SessionPrincipal, session_service
from app.utils.exceptions import MemberError, MemberErrorCode
from app.utils.password import password_encoder as bcrypt_password_encoder

# 탈퇴 회원 익명화 고정값 — Sentinels written over a deactivated account
DELETED_MEMBER_NAME: str = "회원탈퇴한 사용자"
DELETED_MEMBER_PASSWORD: str = "deleted_password"


class PasswordEncoder(Protocol):
    """비밀번호 단방향 해시 계약 (One-way password hash contract)."""

    def encode(self, raw_password: str) -> str: ...

    def matches(self, raw_password: str, encoded_password: str) -> bool: ...


def _has_text(value: str | None) -> bool:
    return value is not None and value.strip() != ""


class MemberService:
    """회원 관련 비즈니스 로직을 처리하는 서비스.

    Service handling member lifecycle business logic.

    Args:
        password_encoder: 비밀번호 인코더 (Password hasher, bcrypt by default)
        authorizer: 권한 검사 정책 (Authorization policy, rejects deactivated members by default)
    """

    def __init__(
        self,
        password_encoder: PasswordEncoder = bcrypt_password_encoder,
        authorizer: Authorizer = active_member_authorizer,
    ) -> None:
        self.password_encoder: PasswordEncoder = password_encoder
        self.authorizer: Authorizer = authorizer

    async def sign_up(
        self,
        db: AsyncSession,
        data: SignupRequest,
    ) -> MemberResponse:
        """회원가입을 처리합니다.

        Register a new ACTIVE member. The password is stored only as a hash.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 회원가입 요청 데이터 (Signup request data)

        Returns:
            MemberResponse: 생성된 회원 정보 (Created member, neutral view)

        Raises:
            MemberError: 이미 가입된 이메일일 때 (EMAIL_DUPLICATE)
        """
        if await member_repository.exists_by_email(db, data.email):
            raise MemberError(MemberErrorCode.EMAIL_DUPLICATE)

        member: Member = Member(
            name=data.name,
            email=data.email,
            password=self.password_encoder.encode(data.password),
            role=data.role.value,
            status=MemberStatus.ACTIVE.value,
        )
        saved: Member = await member_repository.save(db, member)
        return MemberResponse.from_member(saved)

    async def login(
        self,
        db: AsyncSession,
        data: LoginRequest,
    ) -> MemberResponse:
        """로그인 자격 증명을 검증합니다.

        Verify login credentials. Establishing the session is the caller's job.

        Raises:
            MemberError: 이메일이 없을 때 (USER_NOT_FOUND),
                         비밀번호 불일치 시 (PASSWORD_INCORRECT)
        """
        member: Member = await member_repository.find_by_email_or_raise(db, data.email)
        self._check_password(data.password, member)
        return MemberResponse.from_member(member)

    async def logout(
        self,
        db: AsyncSession,
        session_token: str | None,
    ) -> LogoutResponse:
        """현재 세션이 존재하면 무효화합니다.

        Invalidate the current session if there is one; no session is not an error.
        """
        await session_service.invalidate(db, session_token)
        return LogoutResponse()

    async def find_member_by_id(
        self,
        db: AsyncSession,
        member_id: int,
    ) -> MemberProfile:
        """회원 프로필을 조회합니다. 역할에 따라 응답 형식이 달라집니다.

        Look up a member profile. USER members get the neutral view; OWNER
        members additionally get their active store count and a summary of
        every store they own.

        Raises:
            MemberError: 회원이 존재하지 않을 때 (USER_NOT_FOUND)
        """
        member: Member = await member_repository.find_by_id_or_raise(db, member_id)

        if member.role == MemberRole.OWNER:
            # 개수는 영업 중 매장만, 목록은 전체 매장 — count is ACTIVE only, list is all
            active_store_count: int = await store_repository.count_active_stores_by_owner_id(db, member.id)
            stores: list[Store] = await store_repository.find_all_by_owner_id(db, member.id)
            return OwnerProfileResponse(
                name=member.name,
                email=member.email,
                role=MemberRole.OWNER,
                created_at=member.created_at,
                modified_at=member.modified_at,
                active_store_count=active_store_count,
                store_details=[
                    StoreDetail(id=store.id, name=store.name, status=store.status)
                    for store in stores
                ],
            )

        return UserProfileResponse(
            id=member.id,
            name=member.name,
            email=member.email,
            role=MemberRole.USER,
            created_at=member.created_at,
            modified_at=member.modified_at,
        )

    async def update_member_by_id(
        self,
        db: AsyncSession,
        member_id: int,
        data: MemberUpdateRequest,
        principal: SessionPrincipal | None,
    ) -> MemberResponse:
        """본인 회원 정보를 수정합니다.

        Update the logged-in member's own profile. Blank or omitted name,
        email, and new_password leave the stored values unchanged.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member_id: 수정 대상 회원 ID (Target member id)
            data: 수정 데이터 (Update data; ``password`` is the current password)
            principal: 현재 세션 주체 (Current session principal)

        Returns:
            MemberResponse: 수정된 회원 정보 (Updated member, neutral view)

        Raises:
            UnauthorizedError: 로그인 세션이 없을 때 (No session)
            MemberError: USER_NOT_FOUND, USER_DEACTIVATED, PERMISSION_DENIED,
                         PASSWORD_INCORRECT, EMAIL_DUPLICATE
        """
        login_user_email: str = session_service.get_login_user_email(principal)

        login_member: Member = await member_repository.find_by_email_or_raise(db, login_user_email)
        self.authorizer.check_authorization(login_member, principal)

        if login_member.id != member_id:
            raise MemberError(MemberErrorCode.PERMISSION_DENIED)

        member: Member = await member_repository.find_by_id_or_raise(db, member_id)
        self._check_password(data.password, member)

        if _has_text(data.email) and data.email != member.email:
            if await member_repository.exists_by_email(db, data.email):
                raise MemberError(MemberErrorCode.EMAIL_DUPLICATE)

        if _has_text(data.name):
            member.name = data.name
        if _has_text(data.email):
            member.email = data.email
        if _has_text(data.new_password):
            member.password = self.password_encoder.encode(data.new_password)

        saved: Member = await member_repository.save(db, member)
        return MemberResponse.from_member(saved)

    async def delete_member_by_id(
        self,
        db: AsyncSession,
        member_id: int,
        password: str,
        principal: SessionPrincipal | None = None,
    ) -> None:
        """회원 탈퇴를 처리합니다.

        Deactivate a member: status becomes DELETED and the name and password
        are overwritten with fixed sentinels. Deactivating an already deleted
        member is an error, not a no-op.

        Raises:
            MemberError: USER_NOT_FOUND, PASSWORD_INCORRECT, USER_DEACTIVATED
        """
        member: Member = await member_repository.find_by_id_or_raise(db, member_id)
        self.authorizer.check_authorization(member, principal)

        self._check_password(password, member)

        if member.status == MemberStatus.DELETED:
            raise MemberError(MemberErrorCode.USER_DEACTIVATED)

        member.status = MemberStatus.DELETED.value
        member.name = DELETED_MEMBER_NAME
        member.password = DELETED_MEMBER_PASSWORD
        await member_repository.save(db, member)

    def _check_password(self, raw_password: str, member: Member) -> None:
        """비밀번호 일치 여부를 확인합니다 (Raise PASSWORD_INCORRECT on mismatch)."""
        if not self.password_encoder.matches(raw_password, member.password):
            raise MemberError(MemberErrorCode.PASSWORD_INCORRECT)


# 싱글턴 인스턴스 — Singleton instance
member_service: MemberService = MemberService()
