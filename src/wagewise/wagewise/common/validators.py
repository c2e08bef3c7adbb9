from __future__ import annotations

import math
from typing import Any

from ..core.exceptions import InvalidNumberError, LengthExceededError, RequiredFieldError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise RequiredFieldError(f"{field_name} is required.")
    return value.strip()


def require_max_length(value: str, field_name: str, max_len: int) -> str:
    if value is not None and len(value) > max_len:
        raise LengthExceededError(f"{field_name} must be {max_len} characters or less.")
    return value


def _to_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def coerce_amount(value: Any) -> float:
    """Read a meter/advance/repay input, treating anything non-numeric as 0."""
    number = _to_float(value)
    return 0.0 if number is None else number


def require_non_negative_number(value: Any, field_name: str) -> float:
    number = _to_float(value)
    if number is None or number < 0:
        raise InvalidNumberError(f"{field_name} must be a positive number.")
    return number
