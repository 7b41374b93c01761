from __future__ import annotations

from ...core.enums import EmployeeCategory
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: salary - tax - leaves * category deduction, not below 0."""

    def net_salary(self, *, salary: float, tax_rate: float, leaves_taken: int, category: EmployeeCategory) -> float:
        net = (
            salary
            - self.tax(salary=salary, tax_rate=tax_rate)
            - self.leave_deduction(leaves_taken=leaves_taken, category=category)
        )
        return max(net, 0.0)
