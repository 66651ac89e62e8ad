"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for common error patterns
and the typed member error taxonomy used by the member lifecycle service.
Every member failure carries exactly one ``MemberErrorCode``; the HTTP status
and default message are derived from the code.

Usage:
    from app.utils.exceptions import MemberError, MemberErrorCode
    raise MemberError(MemberErrorCode.EMAIL_DUPLICATE)
    raise NotFoundError("Store not found")
"""

from enum import Enum

from fastapi import HTTPException, status


class MemberErrorCode(str, Enum):
    """회원 오류 분류 — 각 코드는 HTTP 상태와 기본 메시지를 가짐.

    Member error taxonomy. Each code maps to an HTTP status and a message.
    """

    EMAIL_DUPLICATE = "EMAIL_DUPLICATE"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    PASSWORD_INCORRECT = "PASSWORD_INCORRECT"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    USER_DEACTIVATED = "USER_DEACTIVATED"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_STATUS_CODES: dict[MemberErrorCode, int] = {
    MemberErrorCode.EMAIL_DUPLICATE: status.HTTP_409_CONFLICT,
    MemberErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    MemberErrorCode.PASSWORD_INCORRECT: status.HTTP_401_UNAUTHORIZED,
    MemberErrorCode.PERMISSION_DENIED: status.HTTP_403_FORBIDDEN,
    MemberErrorCode.USER_DEACTIVATED: status.HTTP_403_FORBIDDEN,
}

_MESSAGES: dict[MemberErrorCode, str] = {
    MemberErrorCode.EMAIL_DUPLICATE: "이미 사용 중인 이메일입니다. (Email already registered)",
    MemberErrorCode.USER_NOT_FOUND: "회원을 찾을 수 없습니다. (Member not found)",
    MemberErrorCode.PASSWORD_INCORRECT: "비밀번호가 일치하지 않습니다. (Password incorrect)",
    MemberErrorCode.PERMISSION_DENIED: "권한이 없습니다. (Permission denied)",
    MemberErrorCode.USER_DEACTIVATED: "탈퇴한 회원입니다. (Member is deactivated)",
}


class MemberError(HTTPException):
    """회원 도메인 예외 — 오류 코드 하나를 담는다.

    Member domain exception carrying a single ``MemberErrorCode``.
    Raised by repositories and services; the application exception handler
    renders it as ``{"code": ..., "detail": ...}``.

    Args:
        code: 오류 분류 코드 (Error taxonomy code)
        detail: 오류 메시지, 생략 시 코드의 기본 메시지
                (Error message; defaults to the code's message)
    """

    def __init__(self, code: MemberErrorCode, detail: str | None = None) -> None:
        super().__init__(status_code=code.status_code, detail=detail or code.message)
        self.code: MemberErrorCode = code


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested resource (store, menu, order) does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized 예외 — 인증 실패 시 사용.

    401 Unauthorized exception.
    Raised when the login session is missing, invalid, or expired.

    Args:
        detail: 오류 메시지 (Error message, default: "Authentication required")
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request data is invalid beyond what Pydantic validation catches
    (e.g. ordering a deleted menu or from a closed store).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
