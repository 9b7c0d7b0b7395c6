from __future__ import annotations

from typing import Any

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_positive_id(value: Any, field_name: str) -> int:
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is invalid") from None
    if parsed <= 0:
        raise ValidationError(f"{field_name} is invalid")
    return parsed


def require_day_of_week(value: Any) -> int:
    if value is None or value == "":
        raise ValidationError("Day of week is required")
    try:
        day = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Day of week is invalid") from None
    if not 0 <= day <= 6:
        raise ValidationError("Day of week must be between 0 (Sunday) and 6 (Saturday)")
    return day


def require_status(value: Any) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    if not value:
        raise ValidationError("Status is required")
    try:
        return AttendanceStatus(str(value).strip().lower())
    except ValueError:
        raise ValidationError(f"Invalid status: {value}") from None
