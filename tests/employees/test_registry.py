from __future__ import annotations

import pytest

from payroll_desk.core.enums import EmployeeCategory
from payroll_desk.core.exceptions import NotFoundError
from payroll_desk.employees.model import Employee
from payroll_desk.employees.registry import EmployeeRegistry


def test_add_and_get():
    registry = EmployeeRegistry()
    registry.add(Employee.create(1, "Alice", 5000, 0.1, EmployeeCategory.FULL_TIME))

    assert 1 in registry
    assert len(registry) == 1
    assert registry.get(1).name == "Alice"
    assert registry.get(99) is None


def test_add_duplicate_id_overwrites_entirely():
    registry = EmployeeRegistry()
    registry.add(Employee.create(1, "Alice", 5000, 0.1, EmployeeCategory.FULL_TIME))
    registry.mark_leave(1)
    registry.mark_leave(1)

    registry.add(Employee.create(1, "Alicia", 3000, 0.2, EmployeeCategory.PART_TIME))

    emp = registry.get(1)
    assert len(registry) == 1
    assert emp.name == "Alicia"
    assert emp.salary == 3000
    assert emp.leaves_taken == 0
    assert emp.net_salary == pytest.approx(2400)


def test_mark_leave_missing_raises_not_found():
    registry = EmployeeRegistry()
    with pytest.raises(NotFoundError):
        registry.mark_leave(42)


def test_mark_leave_n_times():
    registry = EmployeeRegistry([Employee.create(7, "Dan", 2000, 0.1, EmployeeCategory.PART_TIME)])
    for _ in range(4):
        registry.mark_leave(7)
    emp = registry.get(7)
    assert emp.leaves_taken == 4
    assert emp.net_salary == pytest.approx(2000 - 200 - 200)


def test_list_returns_copies():
    registry = EmployeeRegistry([Employee.create(1, "Alice", 5000, 0.1, EmployeeCategory.FULL_TIME)])
    views = registry.list()
    registry.mark_leave(1)
    assert views[0].leaves_taken == 0
    assert registry.list()[0].leaves_taken == 1


def test_recompute_all_is_idempotent():
    registry = EmployeeRegistry(
        [
            Employee.create(1, "Alice", 5000, 0.1, EmployeeCategory.FULL_TIME),
            Employee.create(2, "Bob", 100, 0.5, EmployeeCategory.STANDARD),
        ]
    )
    before = registry.list()
    assert registry.recompute_all() == 2
    assert registry.recompute_all() == 2
    assert registry.list() == before


def test_replace_all_and_clear():
    registry = EmployeeRegistry([Employee.create(1, "Alice", 5000, 0.1, EmployeeCategory.FULL_TIME)])
    registry.replace_all([Employee.create(2, "Bob", 100, 0.5, EmployeeCategory.STANDARD)])
    assert [v.employee_id for v in registry.list()] == [2]
    registry.clear()
    assert len(registry) == 0
