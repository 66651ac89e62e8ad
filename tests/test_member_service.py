"""회원 서비스 테스트 — 가입, 로그인, 프로필 조회/수정, 탈퇴 규칙.

Member service tests — Signup, login, profile lookup/update, and deactivation
rules exercised directly against the service layer.
"""

import pytest
from pydantic import ValidationError
from sqlalchemy import func, select

from app.models.enums import MemberRole, MemberStatus, StoreStatus
from app.models.member import Member
from app.schemas.auth import LoginRequest
from app.schemas.member import (
    MemberUpdateRequest,
    OwnerProfileResponse,
    SignupRequest,
    UserProfileResponse,
)
from app.services.member_service import (
    DELETED_MEMBER_NAME,
    DELETED_MEMBER_PASSWORD,
    MemberService,
    member_service,
)
from app.services.session_service import SessionPrincipal
from app.utils.exceptions import BadRequestError, MemberError, MemberErrorCode, UnauthorizedError
from app.utils.password import verify_password
from tests.conftest import make_member, make_store


def principal_for(member: Member) -> SessionPrincipal:
    return SessionPrincipal(email=member.email, session_id="test-session")


async def count_members(db) -> int:
    return (await db.execute(select(func.count()).select_from(Member))).scalar()


class AllowAllAuthorizer:
    """상태와 무관하게 모두 허용하는 정책 (Policy that never rejects)."""

    def check_authorization(self, member, principal=None) -> None:
        return None


# ===== Sign Up =====

class TestSignUp:
    """회원가입 테스트."""

    async def test_sign_up_stores_hash_not_plaintext(self, db):
        """가입 성공 — 평문 비밀번호를 저장하지 않음."""
        result = await member_service.sign_up(db, SignupRequest(
            name="Alice", email="a@x.com", password="pw1234!", role=MemberRole.USER,
        ))
        assert result.email == "a@x.com"
        assert result.role == MemberRole.USER
        assert not hasattr(result, "password")

        stored = await db.get(Member, result.id)
        assert stored.password != "pw1234!"
        assert verify_password("pw1234!", stored.password)
        assert stored.status == MemberStatus.ACTIVE

    async def test_sign_up_owner(self, db):
        """사장님 가입 — 중립 뷰 반환."""
        result = await member_service.sign_up(db, SignupRequest(
            name="Bob", email="bob@x.com", password="pw", role=MemberRole.OWNER,
        ))
        assert result.role == MemberRole.OWNER
        assert result.id is not None

    async def test_sign_up_duplicate_email_no_write(self, db, user_member):
        """중복 이메일 가입 실패 — 저장 없음, 반복해도 같은 오류."""
        before = await count_members(db)
        for _ in range(2):
            with pytest.raises(MemberError) as exc_info:
                await member_service.sign_up(db, SignupRequest(
                    name="Dup", email=user_member.email, password="whatever",
                ))
            assert exc_info.value.code == MemberErrorCode.EMAIL_DUPLICATE
        assert await count_members(db) == before

    async def test_sign_up_password_over_bcrypt_limit(self, db):
        """72바이트를 넘는 비밀번호는 요청 단계에서 거부, 저장 없음."""
        with pytest.raises(ValidationError):
            SignupRequest(name="Long", email="long@x.com", password="p" * 80)

        # 검증을 거치지 않은 요청도 해싱 전에 400으로 거부
        unchecked = SignupRequest.model_construct(
            name="Long", email="long@x.com", password="p" * 80, role=MemberRole.USER,
        )
        before = await count_members(db)
        with pytest.raises(BadRequestError):
            await member_service.sign_up(db, unchecked)
        assert await count_members(db) == before

    async def test_sign_up_multibyte_password_counts_bytes(self, db):
        """한글 25자(75바이트)는 글자 수가 적어도 거부."""
        with pytest.raises(ValidationError):
            SignupRequest(name="Kor", email="kor@x.com", password="가" * 25)
        result = await member_service.sign_up(db, SignupRequest(
            name="Kor", email="kor@x.com", password="가" * 24,
        ))
        assert result.email == "kor@x.com"


# ===== Login =====

class TestLogin:
    """로그인 테스트."""

    async def test_login_success(self, db, user_member):
        result = await member_service.login(db, LoginRequest(email="user@test.com", password="user123!"))
        assert result.id == user_member.id
        assert result.name == "Test User"

    async def test_login_wrong_password(self, db, user_member):
        with pytest.raises(MemberError) as exc_info:
            await member_service.login(db, LoginRequest(email="user@test.com", password="nope"))
        assert exc_info.value.code == MemberErrorCode.PASSWORD_INCORRECT

    async def test_login_unknown_email(self, db):
        with pytest.raises(MemberError) as exc_info:
            await member_service.login(db, LoginRequest(email="ghost@test.com", password="x"))
        assert exc_info.value.code == MemberErrorCode.USER_NOT_FOUND


# ===== Find By Id =====

class TestFindMemberById:
    """역할별 프로필 조회 테스트."""

    async def test_user_gets_neutral_view(self, db, user_member):
        result = await member_service.find_member_by_id(db, user_member.id)
        assert isinstance(result, UserProfileResponse)
        assert result.id == user_member.id
        assert result.email == user_member.email

    async def test_owner_count_filters_active_list_does_not(self, db, owner_member):
        """영업 중 매장만 세고, 목록에는 전체 매장이 포함됨."""
        await make_store(db, owner_member, "Open 1")
        await make_store(db, owner_member, "Open 2")
        await make_store(db, owner_member, "Closed", status=StoreStatus.INACTIVE)

        result = await member_service.find_member_by_id(db, owner_member.id)
        assert isinstance(result, OwnerProfileResponse)
        assert result.active_store_count == 2
        assert len(result.store_details) == 3
        assert {d.status for d in result.store_details} == {StoreStatus.ACTIVE, StoreStatus.INACTIVE}

    async def test_owner_without_stores(self, db, owner_member):
        result = await member_service.find_member_by_id(db, owner_member.id)
        assert isinstance(result, OwnerProfileResponse)
        assert result.active_store_count == 0
        assert result.store_details == []

    async def test_owner_ignores_other_owners_stores(self, db, owner_member):
        other_owner = await make_member(db, "owner2@test.com", "pw", role=MemberRole.OWNER)
        await make_store(db, other_owner, "Not Mine")
        result = await member_service.find_member_by_id(db, owner_member.id)
        assert result.active_store_count == 0
        assert result.store_details == []

    async def test_unknown_id(self, db):
        with pytest.raises(MemberError) as exc_info:
            await member_service.find_member_by_id(db, 9999)
        assert exc_info.value.code == MemberErrorCode.USER_NOT_FOUND


# ===== Update =====

class TestUpdateMember:
    """회원 정보 수정 테스트."""

    async def test_update_name_and_email(self, db, user_member):
        result = await member_service.update_member_by_id(
            db,
            user_member.id,
            MemberUpdateRequest(name="Renamed", email="renamed@test.com", password="user123!"),
            principal_for(user_member),
        )
        assert result.name == "Renamed"
        assert result.email == "renamed@test.com"

    async def test_omitted_fields_stay_unchanged(self, db, user_member):
        """생략하거나 공백인 필드는 기존 값을 유지함."""
        await member_service.update_member_by_id(
            db, user_member.id, MemberUpdateRequest(password="user123!"), principal_for(user_member),
        )
        result = await member_service.update_member_by_id(
            db,
            user_member.id,
            MemberUpdateRequest(name="   ", email="", password="user123!", new_password=" "),
            principal_for(user_member),
        )
        assert result.name == "Test User"
        assert result.email == "user@test.com"
        stored = await db.get(Member, user_member.id)
        assert verify_password("user123!", stored.password)

    async def test_new_password_is_hashed(self, db, user_member):
        await member_service.update_member_by_id(
            db,
            user_member.id,
            MemberUpdateRequest(password="user123!", new_password="fresh456!"),
            principal_for(user_member),
        )
        stored = await db.get(Member, user_member.id)
        assert stored.password != "fresh456!"
        assert verify_password("fresh456!", stored.password)
        assert not verify_password("user123!", stored.password)

    async def test_other_member_permission_denied(self, db, user_member, other_member):
        """다른 회원 수정 시 PERMISSION_DENIED — 나머지 필드가 유효해도."""
        with pytest.raises(MemberError) as exc_info:
            await member_service.update_member_by_id(
                db,
                other_member.id,
                MemberUpdateRequest(name="Hacked", password="other123!"),
                principal_for(user_member),
            )
        assert exc_info.value.code == MemberErrorCode.PERMISSION_DENIED
        stored = await db.get(Member, other_member.id)
        assert stored.name == "Other User"

    async def test_wrong_current_password_mutates_nothing(self, db, user_member):
        with pytest.raises(MemberError) as exc_info:
            await member_service.update_member_by_id(
                db,
                user_member.id,
                MemberUpdateRequest(name="Nope", email="nope@test.com", password="wrong", new_password="x"),
                principal_for(user_member),
            )
        assert exc_info.value.code == MemberErrorCode.PASSWORD_INCORRECT
        stored = await db.get(Member, user_member.id)
        assert stored.name == "Test User"
        assert stored.email == "user@test.com"
        assert verify_password("user123!", stored.password)

    async def test_email_taken_by_other_member(self, db, user_member, other_member):
        with pytest.raises(MemberError) as exc_info:
            await member_service.update_member_by_id(
                db,
                user_member.id,
                MemberUpdateRequest(email=other_member.email, password="user123!"),
                principal_for(user_member),
            )
        assert exc_info.value.code == MemberErrorCode.EMAIL_DUPLICATE

    async def test_no_session(self, db, user_member):
        with pytest.raises(UnauthorizedError):
            await member_service.update_member_by_id(
                db, user_member.id, MemberUpdateRequest(password="user123!"), None,
            )

    async def test_session_email_no_longer_exists(self, db, user_member):
        principal = SessionPrincipal(email="gone@test.com", session_id="s")
        with pytest.raises(MemberError) as exc_info:
            await member_service.update_member_by_id(
                db, user_member.id, MemberUpdateRequest(password="user123!"), principal,
            )
        assert exc_info.value.code == MemberErrorCode.USER_NOT_FOUND

    async def test_deactivated_principal_rejected(self, db, user_member):
        await member_service.delete_member_by_id(db, user_member.id, "user123!")
        with pytest.raises(MemberError) as exc_info:
            await member_service.update_member_by_id(
                db, user_member.id, MemberUpdateRequest(password="user123!"), principal_for(user_member),
            )
        assert exc_info.value.code == MemberErrorCode.USER_DEACTIVATED

    async def test_new_password_over_bcrypt_limit(self, db, user_member):
        """72바이트를 넘는 새 비밀번호는 거부되고 기존 비밀번호 유지."""
        with pytest.raises(ValidationError):
            MemberUpdateRequest(password="user123!", new_password="n" * 80)

        unchecked = MemberUpdateRequest.model_construct(
            name=None, email=None, password="user123!", new_password="n" * 80,
        )
        with pytest.raises(BadRequestError):
            await member_service.update_member_by_id(
                db, user_member.id, unchecked, principal_for(user_member),
            )
        stored = await db.get(Member, user_member.id)
        assert verify_password("user123!", stored.password)


# ===== Delete =====

class TestDeleteMember:
    """회원 탈퇴 테스트."""

    async def test_delete_anonymises_and_blocks_second_attempt(self, db, user_member):
        await member_service.delete_member_by_id(db, user_member.id, "user123!", principal_for(user_member))

        stored = await db.get(Member, user_member.id)
        assert stored.status == MemberStatus.DELETED
        assert stored.name == DELETED_MEMBER_NAME
        assert stored.password == DELETED_MEMBER_PASSWORD
        assert stored.email == "user@test.com"

        with pytest.raises(MemberError) as exc_info:
            await member_service.delete_member_by_id(db, user_member.id, "user123!", principal_for(user_member))
        assert exc_info.value.code == MemberErrorCode.USER_DEACTIVATED

    async def test_delete_wrong_password(self, db, user_member):
        for _ in range(2):
            with pytest.raises(MemberError) as exc_info:
                await member_service.delete_member_by_id(db, user_member.id, "wrong")
            assert exc_info.value.code == MemberErrorCode.PASSWORD_INCORRECT
        stored = await db.get(Member, user_member.id)
        assert stored.status == MemberStatus.ACTIVE

    async def test_delete_unknown_id(self, db):
        with pytest.raises(MemberError) as exc_info:
            await member_service.delete_member_by_id(db, 4242, "x")
        assert exc_info.value.code == MemberErrorCode.USER_NOT_FOUND

    async def test_status_guard_without_authorization_policy(self, db, user_member):
        """권한 정책이 허용해도 이미 탈퇴한 회원은 USER_DEACTIVATED."""
        service = MemberService(authorizer=AllowAllAuthorizer())
        user_member.status = MemberStatus.DELETED.value
        await db.flush()

        with pytest.raises(MemberError) as exc_info:
            await service.delete_member_by_id(db, user_member.id, "user123!")
        assert exc_info.value.code == MemberErrorCode.USER_DEACTIVATED

    async def test_deleted_member_cannot_log_in(self, db, user_member):
        await member_service.delete_member_by_id(db, user_member.id, "user123!")
        with pytest.raises(MemberError) as exc_info:
            await member_service.login(db, LoginRequest(email="user@test.com", password="user123!"))
        assert exc_info.value.code == MemberErrorCode.PASSWORD_INCORRECT


# ===== Scenario =====

async def test_member_lifecycle_scenario(db):
    """가입 → 로그인 → 오답 로그인 → 탈퇴 → 재탈퇴 시나리오."""
    created = await member_service.sign_up(db, SignupRequest(
        name="A", email="a@x.com", password="secret!", role=MemberRole.USER,
    ))

    logged_in = await member_service.login(db, LoginRequest(email="a@x.com", password="secret!"))
    assert logged_in.id == created.id

    with pytest.raises(MemberError) as exc_info:
        await member_service.login(db, LoginRequest(email="a@x.com", password="bad"))
    assert exc_info.value.code == MemberErrorCode.PASSWORD_INCORRECT

    principal = SessionPrincipal(email="a@x.com", session_id="s")
    await member_service.delete_member_by_id(db, created.id, "secret!", principal)
    assert (await db.get(Member, created.id)).status == MemberStatus.DELETED

    with pytest.raises(MemberError) as exc_info:
        await member_service.delete_member_by_id(db, created.id, "secret!", principal)
    assert exc_info.value.code == MemberErrorCode.USER_DEACTIVATED
