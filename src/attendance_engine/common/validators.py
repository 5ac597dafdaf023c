from __future__ import annotations

from ..core.exceptions import InputValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise InputValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise InputValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_non_negative(value: float, field_name: str) -> float:
    if value is None or value < 0:
        raise InputValidationError(f"{field_name} must be >= 0")
    return value
