from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..employees.registry import EmployeeRegistry
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayrollReport:
    rows: list[dict]
    summary: dict


class PayrollService:
    """Use case: process payroll and report on it."""

    def __init__(self, registry: EmployeeRegistry, *, calculator: Optional[PayrollCalculator] = None):
        self._registry = registry
        self._calculator = calculator or StandardPayrollCalculator()

    def process(self) -> int:
        count = self._registry.recompute_all()
        logger.info("Payroll processed for %d employees", count)
        return count

    def build_report(self) -> PayrollReport:
        rows: list[dict] = []
        totals = {
            "headcount": 0,
            "total_salary": 0.0,
            "total_tax": 0.0,
            "total_leave_deduction": 0.0,
            "total_net_salary": 0.0,
        }

        for e in sorted(self._registry.list(), key=lambda v: v.employee_id):
            tax = self._calculator.tax(salary=e.salary, tax_rate=e.tax_rate)
            deduction = self._calculator.leave_deduction(leaves_taken=e.leaves_taken, category=e.category)

            rows.append(
                {
                    "id": e.employee_id,
                    "name": e.name,
                    "category": e.category_label,
                    "salary": e.salary,
                    "tax": tax,
                    "leaves_taken": e.leaves_taken,
                    "leave_deduction": deduction,
                    "net_salary": e.net_salary,
                }
            )

            totals["headcount"] += 1
            totals["total_salary"] += e.salary
            totals["total_tax"] += tax
            totals["total_leave_deduction"] += deduction
            totals["total_net_salary"] += e.net_salary

        return PayrollReport(rows=rows, summary=totals)
