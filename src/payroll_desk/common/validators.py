from __future__ import annotations

import math
from typing import Union

from ..core.exceptions import ParseError, ValidationError

Number = Union[int, float, str]


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_non_negative(value: float, field_name: str) -> float:
    if value < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return value


def require_fraction(value: float, field_name: str) -> float:
    if not 0 <= value <= 1:
        raise ValidationError(f"{field_name} must be between 0 and 1")
    return value


def parse_int(value: Number, field_name: str) -> int:
    """Parse an integer id typed by the user ("  12 " -> 12)."""
    if isinstance(value, bool):
        raise ParseError(f"Invalid {field_name}: {value!r}")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise ParseError(f"Invalid {field_name}: {value!r}") from None


def parse_float(value: Number, field_name: str) -> float:
    if isinstance(value, bool):
        raise ParseError(f"Invalid {field_name}: {value!r}")
    try:
        number = float(value.strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        raise ParseError(f"Invalid {field_name}: {value!r}") from None
    if not math.isfinite(number):
        raise ParseError(f"Invalid {field_name}: {value!r}")
    return number
