from __future__ import annotations

import logging
from typing import Optional, Union

from ..common.validators import parse_float, parse_int
from ..core.enums import EmployeeCategory
from ..core.exceptions import DomainError, NotFoundError, PersistenceError, StoreNotFoundError
from ..core.result import Result
from ..payroll.service import PayrollService
from .model import Employee, EmployeeView
from .registry import EmployeeRegistry
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

Number = Union[int, float, str]


class EmployeeService:
    """Use case: one session's employee registry with write-through saving.

    Every operation reports through a ``Result``; domain and storage errors
    never escape. ``add_employee`` and ``mark_leave`` save the whole registry
    right after the change. A failed save is reported but the in-memory change
    is kept.
    """

    def __init__(
        self,
        registry: EmployeeRegistry,
        repository: EmployeeRepository,
        payroll: Optional[PayrollService] = None,
    ):
        self._registry = registry
        self._repository = repository
        self._payroll = payroll or PayrollService(registry)

    @property
    def registry(self) -> EmployeeRegistry:
        return self._registry

    def add_employee(
        self,
        employee_id: Number,
        name: str,
        salary: Number,
        tax_rate: Number,
        category: Union[EmployeeCategory, str, None],
    ) -> Result:
        try:
            employee = Employee.create(
                parse_int(employee_id, "ID"),
                name or "",
                parse_float(salary, "salary"),
                parse_float(tax_rate, "tax rate"),
                EmployeeCategory.parse(category),
                calculator=self._registry.calculator,
            )
        except DomainError as exc:
            logger.warning("Add employee rejected: %s", exc)
            return Result.failure(str(exc), exc)

        self._registry.add(employee)
        logger.info("Added employee %s (%s)", employee.employee_id, employee.category.label)
        return self._write_through("Employee added successfully.", employee.view())

    def mark_leave(self, employee_id: Number) -> Result:
        try:
            employee = self._registry.mark_leave(parse_int(employee_id, "ID"))
        except NotFoundError as exc:
            logger.warning("Mark leave for %r: %s", employee_id, exc)
            return Result.failure(str(exc), exc)
        except DomainError as exc:
            logger.warning("Mark leave rejected for %r", employee_id)
            return Result.failure("Invalid ID.", exc)

        logger.info("Leave marked for employee %s (total %d)", employee.employee_id, employee.leaves_taken)
        return self._write_through(f"Leave marked for {employee.name}.", employee.view())

    def process_payroll(self) -> None:
        self._payroll.process()

    def list_employees(self) -> list[EmployeeView]:
        return self._registry.list()

    def get_employee(self, employee_id: Number) -> Result:
        try:
            employee = self._registry.get(parse_int(employee_id, "ID"))
        except DomainError as exc:
            return Result.failure("Invalid ID.", exc)
        if employee is None:
            return Result.failure("Employee not found.", NotFoundError("Employee not found."))
        return Result.success(str(employee), employee.view())

    def save(self) -> Result:
        try:
            self._repository.save(list(self._registry))
        except PersistenceError as exc:
            logger.error("Save failed: %s", exc)
            return Result.failure(f"Save failed: {exc}", exc)
        return Result.success("Data saved successfully.")

    def load(self) -> Result:
        try:
            employees = self._repository.load()
        except StoreNotFoundError:
            self._registry.clear()
            logger.info("No previous data found, starting with an empty registry")
            return Result.success("No previous data found. Starting fresh.")
        except PersistenceError as exc:
            self._registry.clear()
            logger.error("Could not read saved data: %s", exc)
            return Result.failure(f"Could not read saved data: {exc}. Starting fresh.", exc)

        self._registry.replace_all(employees)
        logger.info("Loaded %d employees", len(self._registry))
        return Result.success("Data loaded.", len(self._registry))

    def _write_through(self, message: str, data: EmployeeView) -> Result:
        saved = self.save()
        if not saved.ok:
            return Result(ok=False, message=f"{message} {saved.message}", data=data, error=saved.error)
        return Result.success(message, data)
