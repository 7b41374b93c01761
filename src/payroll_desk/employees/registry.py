from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from ..core.exceptions import NotFoundError
from ..payroll.calculator.base import PayrollCalculator
from .model import Employee, EmployeeView

logger = logging.getLogger(__name__)


class EmployeeRegistry:
    """In-memory collection of employees keyed by id.

    The registry owns its records; callers get ``EmployeeView`` copies from
    ``list()``. Records entering through ``add`` or ``replace_all`` are
    recomputed with the registry's calculator, so every net salary follows
    one rule. Persistence is the service's job, not the registry's.
    """

    def __init__(self, employees: Iterable[Employee] = (), *, calculator: Optional[PayrollCalculator] = None):
        self._calculator = calculator
        self._employees: dict[int, Employee] = {}
        self.replace_all(employees)

    @property
    def calculator(self) -> Optional[PayrollCalculator]:
        return self._calculator

    def add(self, employee: Employee) -> None:
        """Insert or overwrite; the last write for an id wins."""
        employee.recompute_net_salary(self._calculator)
        if employee.employee_id in self._employees:
            logger.info("Overwriting employee %s", employee.employee_id)
        self._employees[employee.employee_id] = employee

    def get(self, employee_id: int) -> Optional[Employee]:
        return self._employees.get(employee_id)

    def mark_leave(self, employee_id: int) -> Employee:
        employee = self._employees.get(employee_id)
        if employee is None:
            raise NotFoundError("Employee not found.")
        employee.mark_leave(self._calculator)
        return employee

    def recompute_all(self) -> int:
        for employee in self._employees.values():
            employee.recompute_net_salary(self._calculator)
        return len(self._employees)

    def list(self) -> list[EmployeeView]:
        return [employee.view() for employee in self._employees.values()]

    def replace_all(self, employees: Iterable[Employee]) -> None:
        self._employees = {}
        for employee in employees:
            employee.recompute_net_salary(self._calculator)
            self._employees[employee.employee_id] = employee

    def clear(self) -> None:
        self._employees = {}

    def __iter__(self) -> Iterator[Employee]:
        return iter(list(self._employees.values()))

    def __len__(self) -> int:
        return len(self._employees)

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._employees
