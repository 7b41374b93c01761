from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .exceptions import DomainError


@dataclass(frozen=True)
class Result:
    """Outcome of a user-triggered operation: a status message, never an exception.

    A failed result keeps the ``DomainError`` that caused it so callers can
    tell the kinds apart without reading the message.
    """

    ok: bool
    message: str = ""
    data: Any = None
    error: Optional[DomainError] = None

    @classmethod
    def success(cls, message: str = "", data: Any = None) -> "Result":
        return cls(ok=True, message=message, data=data)

    @classmethod
    def failure(cls, message: str, error: Optional[DomainError] = None) -> "Result":
        return cls(ok=False, message=message, error=error)
