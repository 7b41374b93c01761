from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import require_fraction, require_non_empty, require_non_negative
from ..core.enums import EmployeeCategory
from ..payroll.calculator.base import PayrollCalculator
from ..payroll.calculator.standard_calculator import StandardPayrollCalculator

_DEFAULT_CALCULATOR = StandardPayrollCalculator()


@dataclass(frozen=True)
class EmployeeView:
    """Read-only snapshot of an employee, taken for display."""

    employee_id: int
    name: str
    salary: float
    tax_rate: float
    category: EmployeeCategory
    leaves_taken: int
    net_salary: float

    @property
    def category_label(self) -> str:
        return self.category.label

    def as_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "name": self.name,
            "salary": self.salary,
            "tax_rate": self.tax_rate,
            "category": self.category.value,
            "category_label": self.category.label,
            "leaves_taken": self.leaves_taken,
            "net_salary": self.net_salary,
        }


@dataclass
class Employee:
    """Domain entity: one employee and their current net salary.

    ``net_salary`` is derived. Every method that changes salary inputs
    recomputes it before returning, so callers never see a stale value.
    Records are owned by the registry; hand out ``view()`` snapshots instead.
    """

    employee_id: int
    name: str
    salary: float
    tax_rate: float
    category: EmployeeCategory
    leaves_taken: int = 0
    net_salary: float = 0.0

    @classmethod
    def create(
        cls,
        employee_id: int,
        name: str,
        salary: float,
        tax_rate: float,
        category: EmployeeCategory,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ) -> "Employee":
        employee = cls(
            employee_id=int(employee_id),
            name=require_non_empty(name, "Name"),
            salary=float(require_non_negative(salary, "Salary")),
            tax_rate=float(require_fraction(tax_rate, "Tax rate")),
            category=EmployeeCategory(category),
        )
        employee.recompute_net_salary(calculator)
        return employee

    def mark_leave(self, calculator: Optional[PayrollCalculator] = None) -> None:
        self.leaves_taken += 1
        self.recompute_net_salary(calculator)

    def recompute_net_salary(self, calculator: Optional[PayrollCalculator] = None) -> float:
        calc = calculator or _DEFAULT_CALCULATOR
        self.net_salary = calc.net_salary(
            salary=self.salary,
            tax_rate=self.tax_rate,
            leaves_taken=self.leaves_taken,
            category=self.category,
        )
        return self.net_salary

    def view(self) -> EmployeeView:
        return EmployeeView(
            employee_id=self.employee_id,
            name=self.name,
            salary=self.salary,
            tax_rate=self.tax_rate,
            category=self.category,
            leaves_taken=self.leaves_taken,
            net_salary=self.net_salary,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "name": self.name,
            "salary": self.salary,
            "tax_rate": self.tax_rate,
            "category": self.category.value,
            "leaves_taken": self.leaves_taken,
            "net_salary": self.net_salary,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, calculator: Optional[PayrollCalculator] = None) -> "Employee":
        """Rebuild a stored record.

        Raises KeyError/TypeError/ValueError on malformed data. The stored
        ``net_salary`` is ignored and recomputed from its inputs.
        """
        leaves_taken = data["leaves_taken"]
        if isinstance(leaves_taken, bool) or not isinstance(leaves_taken, int) or leaves_taken < 0:
            raise ValueError(f"invalid leaves_taken: {leaves_taken!r}")
        if not isinstance(data["name"], str):
            raise TypeError(f"invalid name: {data['name']!r}")

        employee = cls(
            employee_id=int(data["id"]),
            name=data["name"],
            salary=float(data["salary"]),
            tax_rate=float(data["tax_rate"]),
            category=EmployeeCategory(data["category"]),
            leaves_taken=leaves_taken,
        )
        employee.recompute_net_salary(calculator)
        return employee

    def __str__(self) -> str:
        return (
            f"{self.category.label} - ID: {self.employee_id}"
            f", Name: {self.name}"
            f", Salary: {self.salary}"
            f", Tax Rate: {self.tax_rate}"
            f", Leaves: {self.leaves_taken}"
            f", Net Salary: {self.net_salary}"
        )
