from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import EmployeeCategory


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def net_salary(self, *, salary: float, tax_rate: float, leaves_taken: int, category: EmployeeCategory) -> float:
        raise NotImplementedError

    def tax(self, *, salary: float, tax_rate: float) -> float:
        return salary * tax_rate

    def leave_deduction(self, *, leaves_taken: int, category: EmployeeCategory) -> float:
        return leaves_taken * category.leave_deduction
