"""회원 관련 Pydantic 요청/응답 스키마 정의.

Member Pydantic request/response schema definitions.
Covers signup, profile update, deactivation, and the role-dependent
profile views. No response ever carries the password or its hash.
"""

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, field_validator

from app.models.enums import MemberRole, StoreStatus
from app.models.member import Member
from app.utils.password import MAX_PASSWORD_BYTES, password_too_long


def _check_password_length(value: str | None) -> str | None:
    if value is not None and password_too_long(value):
        raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


# === 요청 (Request) 스키마 ===

class SignupRequest(BaseModel):
    """회원가입 요청 스키마.

    Signup request schema.

    Attributes:
        name: 표시 이름 (Display name)
        email: 이메일, 로그인 아이디 (Login email, globally unique)
        password: 비밀번호 (Plain text, bcrypt-hashed on server)
        role: 회원 역할 USER/OWNER (Member role)
    """

    name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)  # 평문, 서버에서 bcrypt 해싱 (Plain text, hashed server-side)
    role: MemberRole = MemberRole.USER

    @field_validator("password")
    @classmethod
    def _password_fits_bcrypt(cls, value: str) -> str:
        return _check_password_length(value)


class MemberUpdateRequest(BaseModel):
    """회원 정보 수정 요청 스키마 (부분 업데이트).

    Member update request schema (partial update).
    ``password`` is the current password and is always required.
    Omitted or blank name/email/new_password leave the stored value unchanged.

    Attributes:
        name: 변경할 이름 (New display name, optional)
        email: 변경할 이메일 (New email, optional)
        password: 현재 비밀번호 (Current password, required)
        new_password: 새 비밀번호 (New password, optional)
    """

    name: str | None = None
    email: str | None = None
    password: str  # 현재 비밀번호 — 본인 확인용 (Current password for verification)
    new_password: str | None = None

    @field_validator("new_password")
    @classmethod
    def _new_password_fits_bcrypt(cls, value: str | None) -> str | None:
        return _check_password_length(value)


class MemberDeleteRequest(BaseModel):
    """회원 탈퇴 요청 스키마 — 본인 확인용 비밀번호.

    Member deactivation request schema carrying the current password.
    """

    password: str


# === 응답 (Response) 스키마 ===

class MemberResponse(BaseModel):
    """회원 중립 응답 스키마 (역할 무관).

    Role-neutral member view returned by signup, login, and update.

    Attributes:
        id: 회원 ID (Member identifier)
        name: 표시 이름 (Display name)
        email: 이메일 (Email)
        role: 회원 역할 (Member role)
        created_at: 생성 일시 (Creation timestamp)
        modified_at: 수정 일시 (Last update timestamp)
    """

    id: int
    name: str
    email: str
    role: MemberRole
    created_at: datetime
    modified_at: datetime

    @classmethod
    def from_member(cls, member: Member) -> "MemberResponse":
        """회원 모델을 응답 스키마로 변환합니다 (Convert a Member model)."""
        return cls(
            id=member.id,
            name=member.name,
            email=member.email,
            role=MemberRole(member.role),
            created_at=member.created_at,
            modified_at=member.modified_at,
        )


class UserProfileResponse(MemberResponse):
    """일반 회원(USER) 프로필 응답 — 중립 뷰와 동일한 필드."""

    role: Literal[MemberRole.USER]


class StoreDetail(BaseModel):
    """사장님 프로필의 매장 요약 (Store summary on an owner profile)."""

    id: int
    name: str
    status: StoreStatus


class OwnerProfileResponse(BaseModel):
    """사장님(OWNER) 프로필 응답 스키마.

    Owner profile view. ``active_store_count`` counts only ACTIVE stores while
    ``store_details`` lists every store the owner has, active or not.

    Attributes:
        name: 표시 이름 (Display name)
        email: 이메일 (Email)
        role: 회원 역할, 항상 OWNER (Always OWNER)
        created_at: 생성 일시 (Creation timestamp)
        modified_at: 수정 일시 (Last update timestamp)
        active_store_count: 영업 중 매장 수 (Number of active stores)
        store_details: 전체 매장 요약 목록 (Summaries of all owned stores)
    """

    name: str
    email: str
    role: Literal[MemberRole.OWNER]
    created_at: datetime
    modified_at: datetime
    active_store_count: int
    store_details: list[StoreDetail] = []


# 역할 기반 태그 유니온 — Profile view discriminated by role
MemberProfile = Annotated[
    Union[UserProfileResponse, OwnerProfileResponse],
    Field(discriminator="role"),
]
