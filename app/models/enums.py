"""도메인 열거형 정의 — 역할 및 상태 값.

Domain enumerations — Roles and status values.
Stored as plain strings (String(20)) in the database; the ``str`` mixin keeps
them JSON-serialisable and comparable with raw column values.
"""

from enum import Enum


class MemberRole(str, Enum):
    """회원 역할 — 가입 후 변경 불가 (Member role, immutable after signup)."""

    USER = "USER"
    OWNER = "OWNER"


class MemberStatus(str, Enum):
    """회원 상태 — ACTIVE → DELETED 단방향 전이 (One-way transition)."""

    ACTIVE = "ACTIVE"
    DELETED = "DELETED"


class StoreStatus(str, Enum):
    """매장 영업 상태 (Store operating status)."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class MenuStatus(str, Enum):
    """메뉴 상태 (Menu status)."""

    ACTIVE = "ACTIVE"
    DELETED = "DELETED"


class OrderStatus(str, Enum):
    """주문 진행 상태.

    Order workflow status:
    ORDERED → ACCEPTED → COOKING → DELIVERING → DELIVERED, or CANCELED.
    """

    ORDERED = "ORDERED"
    ACCEPTED = "ACCEPTED"
    COOKING = "COOKING"
    DELIVERING = "DELIVERING"
    DELIVERED = "DELIVERED"
    CANCELED = "CANCELED"
