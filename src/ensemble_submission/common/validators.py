from __future__ import annotations

from typing import Optional

from ..core.exceptions import MissingInputError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise MissingInputError(f"Missing {field_name}")
    return value.strip()


def require_non_negative(value: int, field_name: str) -> int:
    if value < 0:
        raise ValueError(f"{field_name} must be >= 0, got {value}")
    return int(value)
