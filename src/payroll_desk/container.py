from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .employees.json_employee_repository import InMemoryEmployeeRepository, JsonFileEmployeeRepository
from .employees.registry import EmployeeRegistry
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .payroll.calculator.base import PayrollCalculator
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.service import PayrollService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    registry: EmployeeRegistry

    employee_service: EmployeeService
    payroll_service: PayrollService


def build_container(
    *,
    data_file: Union[str, Path, None],
    calculator: Optional[PayrollCalculator] = None,
) -> Container:
    """Wire one session. An empty ``data_file`` keeps everything in memory."""
    calculator = calculator or StandardPayrollCalculator()

    if data_file:
        employees_repo: EmployeeRepository = JsonFileEmployeeRepository(data_file)
    else:
        employees_repo = InMemoryEmployeeRepository()

    registry = EmployeeRegistry(calculator=calculator)
    payroll_service = PayrollService(registry, calculator=calculator)
    employee_service = EmployeeService(registry, employees_repo, payroll_service)

    return Container(
        employees_repo=employees_repo,
        registry=registry,
        employee_service=employee_service,
        payroll_service=payroll_service,
    )
