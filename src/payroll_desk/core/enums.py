from __future__ import annotations

from enum import Enum
from typing import Optional

from .constants import FULL_TIME_LEAVE_DEDUCTION, PART_TIME_LEAVE_DEDUCTION, STANDARD_LEAVE_DEDUCTION
from .exceptions import ParseError, SelectionCancelled


class EmployeeCategory(str, Enum):
    """Employee category; decides the per-leave deduction."""

    STANDARD = "STANDARD"
    FULL_TIME = "FULL_TIME"
    PART_TIME = "PART_TIME"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def leave_deduction(self) -> int:
        return _LEAVE_DEDUCTIONS[self]

    @classmethod
    def parse(cls, value: Optional[str]) -> "EmployeeCategory":
        """Read a category from user input.

        Accepts the enum value or the label in any case, with ``-``, ``_`` or
        spaces as separators ("Full-Time", "full time", "FULL_TIME").
        A missing or blank value means the user made no choice.
        """
        if isinstance(value, cls):
            return value
        if value is None or not str(value).strip():
            raise SelectionCancelled("Employee type not selected. Cancelled.")

        key = "".join(ch for ch in str(value).upper() if ch.isalnum())
        for category in cls:
            if key in (category.value.replace("_", ""), category.label.upper()):
                return category
        raise ParseError(f"Unknown employee type: {value}")


_LABELS = {
    EmployeeCategory.STANDARD: "Standard",
    EmployeeCategory.FULL_TIME: "FullTime",
    EmployeeCategory.PART_TIME: "PartTime",
}

_LEAVE_DEDUCTIONS = {
    EmployeeCategory.STANDARD: STANDARD_LEAVE_DEDUCTION,
    EmployeeCategory.FULL_TIME: FULL_TIME_LEAVE_DEDUCTION,
    EmployeeCategory.PART_TIME: PART_TIME_LEAVE_DEDUCTION,
}
