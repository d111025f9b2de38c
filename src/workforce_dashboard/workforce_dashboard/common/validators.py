from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_month_index(month: int) -> int:
    if not 0 <= int(month) <= 11:
        raise ValidationError(f"Month index must be between 0 and 11, got {month}")
    return int(month)


def optional_text(value: Any) -> str:
    """Trimmed text for an optional field; ``None`` and ``""`` give ``""``, numbers are stringified."""
    if value is None:
        return ""
    return str(value).strip()
