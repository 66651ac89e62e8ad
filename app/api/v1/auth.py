"""인증 라우터 — 로그인, 로그아웃.

Auth Router — Login and logout endpoints.
Login verifies credentials through the member service and then opens a
server-side session carried by an HTTP-only cookie.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_session_token
from app.config import settings
from app.database import get_db
from app.schemas.auth import LoginRequest, LogoutResponse
from app.schemas.member import MemberResponse
from app.services.member_service import member_service
from app.services.session_service import session_service

router: APIRouter = APIRouter()


@router.post("/login", response_model=MemberResponse)
async def login(
    data: LoginRequest,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MemberResponse:
    """로그인 — 자격 증명 확인 후 세션 쿠키 발급.

    Login endpoint. Verifies credentials and sets the session cookie.
    """
    result: MemberResponse = await member_service.login(db, data)
    token, _ = await session_service.open(db, result.email)
    await db.commit()

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
    session_token: Annotated[str | None, Depends(get_session_token)],
) -> LogoutResponse:
    """로그아웃 — 세션이 있으면 무효화, 없어도 성공.

    Logout endpoint. Invalidates the session if present; succeeds either way.
    """
    result: LogoutResponse = await member_service.logout(db, session_token)
    await db.commit()
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return result
