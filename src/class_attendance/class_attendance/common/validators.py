from __future__ import annotations

import math
from typing import Any

from ..core.constants import MAX_NAME_LENGTH
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    value = value.strip()
    if len(value) > MAX_NAME_LENGTH:
        raise ValidationError(f"{field_name} must not exceed {MAX_NAME_LENGTH} characters")
    return value


def require_positive_id(value: Any, field_name: str) -> int:
    # bool is an int subclass; True must not pass as id 1.
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} is required")
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f"{field_name} must be an integer")
    try:
        parsed = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{field_name} must be an integer") from None
    if parsed <= 0:
        raise ValidationError(f"{field_name} must be a positive integer")
    return parsed


def _require_number(value: Any, field_name: str) -> float:
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} is required")
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None
    if not math.isfinite(parsed):
        raise ValidationError(f"{field_name} must be a finite number")
    return parsed


def require_number_between(value: Any, field_name: str, low: float, high: float) -> float:
    parsed = _require_number(value, field_name)
    if not low <= parsed <= high:
        raise ValidationError(f"{field_name} must be between {low:g} and {high:g}")
    return parsed


def require_number_at_least(value: Any, field_name: str, low: float) -> float:
    parsed = _require_number(value, field_name)
    if parsed < low:
        raise ValidationError(f"{field_name} must be at least {low:g}")
    return parsed


def require_latitude(value: Any) -> float:
    return require_number_between(value, "Latitude", -90, 90)


def require_longitude(value: Any) -> float:
    return require_number_between(value, "Longitude", -180, 180)
