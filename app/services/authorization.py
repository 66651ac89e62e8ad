"""회원 권한 검사 정책.

Member authorization policy.
The member service depends only on the ``Authorizer`` protocol, so the
concrete policy can be swapped without touching the lifecycle rules.
"""

from typing import Protocol

from app.models.enums import MemberStatus
from app.models.member import Member
from app.services.session_service import SessionPrincipal
from app.utils.exceptions import MemberError, MemberErrorCode


class Authorizer(Protocol):
    """회원이 작업을 수행할 수 있는지 검사하는 계약.

    Contract for checking whether a member may act. Implementations raise a
    ``MemberError`` to reject and return None to allow.
    """

    def check_authorization(
        self,
        member: Member,
        principal: SessionPrincipal | None = None,
    ) -> None: ...


class ActiveMemberAuthorizer:
    """탈퇴(DELETED) 회원의 모든 작업을 거부하는 기본 정책.

    Default policy: a DELETED member may not act (``USER_DEACTIVATED``).
    """

    def check_authorization(
        self,
        member: Member,
        principal: SessionPrincipal | None = None,
    ) -> None:
        if member.status == MemberStatus.DELETED:
            raise MemberError(MemberErrorCode.USER_DEACTIVATED)


# 싱글턴 인스턴스 — Singleton instance
active_member_authorizer: ActiveMemberAuthorizer = ActiveMemberAuthorizer()
