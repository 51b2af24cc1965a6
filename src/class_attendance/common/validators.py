from __future__ import annotations

from datetime import date
from typing import Any

from ..core.constants import MAX_ID
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def require_id(value: Any, field_name: str) -> int:
    """Accept an integer id given as int or numeric string."""
    if _is_missing(value):
        raise ValidationError(f"{field_name} is required")
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a positive integer")
    try:
        parsed = int(str(value).strip()) if isinstance(value, str) else int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{field_name} must be a positive integer") from None
    if isinstance(value, float) and value != parsed:
        raise ValidationError(f"{field_name} must be a positive integer")
    if parsed <= 0:
        raise ValidationError(f"{field_name} must be a positive integer")
    if parsed > MAX_ID:
        raise ValidationError(f"{field_name} is out of range")
    return parsed


def require_date(value: Any, field_name: str = "date") -> date:
    if _is_missing(value):
        raise ValidationError(f"{field_name} is required")
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be an ISO date (YYYY-MM-DD)") from None


def require_list(value: Any, field_name: str) -> list:
    if value is None:
        raise ValidationError(f"{field_name} is required")
    if not isinstance(value, (list, tuple)):
        raise ValidationError(f"{field_name} must be a list")
    return list(value)


def require_status(value: Any, field_name: str = "status") -> AttendanceStatus:
    if _is_missing(value):
        raise ValidationError(f"{field_name} is required")
    try:
        return AttendanceStatus(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(s.value for s in AttendanceStatus)
        raise ValidationError(f"{field_name} must be one of: {allowed}") from None
