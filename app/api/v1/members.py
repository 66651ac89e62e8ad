"""회원 라우터 — 회원가입, 프로필 조회/수정, 회원 탈퇴 API.

Member Router — Signup, profile read/update, and deactivation endpoints.
Follows 3-layer architecture: Router → Service → Repository.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_principal
from app.database import get_db
from app.schemas.member import (
    MemberDeleteRequest,
    MemberProfile,
    MemberResponse,
    MemberUpdateRequest,
    SignupRequest,
)
from app.services.member_service import member_service
from app.services.session_service import SessionPrincipal, session_service

router: APIRouter = APIRouter()


@router.post("/signup", response_model=MemberResponse, status_code=201)
async def sign_up(
    data: SignupRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MemberResponse:
    """회원가입 — 일반 회원 또는 사장님 계정 생성.

    Register a USER or OWNER account.
    """
    result: MemberResponse = await member_service.sign_up(db, data)
    await db.commit()
    return result


@router.get("/{member_id}", response_model=MemberProfile)
async def get_member(
    member_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MemberProfile:
    """회원 프로필 조회 — 사장님이면 매장 요약 포함.

    Get a member profile. Owner profiles include store aggregates.
    """
    return await member_service.find_member_by_id(db, member_id)


@router.patch("/{member_id}", response_model=MemberResponse)
async def update_member(
    member_id: int,
    data: MemberUpdateRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    principal: Annotated[SessionPrincipal, Depends(get_current_principal)],
) -> MemberResponse:
    """본인 회원 정보 수정.

    Update the logged-in member's own profile.
    """
    result: MemberResponse = await member_service.update_member_by_id(
        db, member_id, data, principal
    )
    # 이메일이 바뀌면 세션 주체도 갱신 — Keep the session bound to the new email
    if result.email != principal.email:
        await session_service.rebind_email(db, principal, result.email)
    await db.commit()
    return result


@router.delete("/{member_id}", status_code=204)
async def delete_member(
    member_id: int,
    data: MemberDeleteRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    principal: Annotated[SessionPrincipal, Depends(get_current_principal)],
) -> None:
    """회원 탈퇴 — 상태를 DELETED로 변경하고 개인정보를 익명화.

    Deactivate a member account.
    """
    await member_service.delete_member_by_id(db, member_id, data.password, principal)
    await db.commit()
