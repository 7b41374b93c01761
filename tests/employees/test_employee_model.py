from __future__ import annotations

import pytest

from payroll_desk.core.enums import EmployeeCategory
from payroll_desk.core.exceptions import ParseError, SelectionCancelled, ValidationError
from payroll_desk.employees.model import Employee


def test_create_computes_net_salary_immediately():
    alice = Employee.create(1, "Alice", 5000, 0.1, EmployeeCategory.FULL_TIME)
    assert alice.leaves_taken == 0
    assert alice.net_salary == pytest.approx(4500)


def test_recompute_after_create_is_idempotent():
    alice = Employee.create(1, "Alice", 5000, 0.1, EmployeeCategory.FULL_TIME)
    before = alice.net_salary
    assert alice.recompute_net_salary() == before
    assert alice.recompute_net_salary() == before


def test_full_time_two_leaves():
    alice = Employee.create(1, "Alice", 5000, 0.1, EmployeeCategory.FULL_TIME)
    alice.mark_leave()
    alice.mark_leave()
    assert alice.leaves_taken == 2
    assert alice.net_salary == pytest.approx(4200)


def test_part_time_two_leaves():
    alice = Employee.create(1, "Alice", 5000, 0.1, EmployeeCategory.PART_TIME)
    alice.mark_leave()
    alice.mark_leave()
    assert alice.net_salary == pytest.approx(4400)


def test_standard_leave_clamps_at_zero():
    bob = Employee.create(2, "Bob", 100, 0.5, EmployeeCategory.STANDARD)
    bob.mark_leave()
    assert bob.net_salary == 0


def test_mark_leave_recomputes_each_time():
    emp = Employee.create(3, "Carol", 1000, 0.0, EmployeeCategory.STANDARD)
    seen = []
    for _ in range(5):
        emp.mark_leave()
        seen.append(emp.net_salary)
    assert emp.leaves_taken == 5
    assert seen == [900, 800, 700, 600, 500]


@pytest.mark.parametrize(
    "salary, tax_rate",
    [(-1, 0.1), (1000, -0.1), (1000, 1.5)],
)
def test_create_rejects_out_of_range_values(salary, tax_rate):
    with pytest.raises(ValidationError):
        Employee.create(1, "Alice", salary, tax_rate, EmployeeCategory.STANDARD)


def test_create_rejects_blank_name():
    with pytest.raises(ValidationError):
        Employee.create(1, "   ", 1000, 0.1, EmployeeCategory.STANDARD)


def test_str_lists_every_field_in_order():
    alice = Employee.create(1, "Alice", 5000, 0.1, EmployeeCategory.FULL_TIME)
    assert str(alice) == (
        "FullTime - ID: 1, Name: Alice, Salary: 5000.0, Tax Rate: 0.1, Leaves: 0, Net Salary: 4500.0"
    )


def test_view_is_a_snapshot():
    alice = Employee.create(1, "Alice", 5000, 0.1, EmployeeCategory.FULL_TIME)
    view = alice.view()
    alice.mark_leave()
    assert view.leaves_taken == 0
    assert view.category_label == "FullTime"


def test_from_dict_recomputes_net_salary():
    data = Employee.create(1, "Alice", 5000, 0.1, EmployeeCategory.PART_TIME).to_dict()
    data["leaves_taken"] = 3
    data["net_salary"] = 12345

    restored = Employee.from_dict(data)

    assert restored.leaves_taken == 3
    assert restored.net_salary == pytest.approx(4350)


@pytest.mark.parametrize(
    "field, value",
    [("leaves_taken", -1), ("leaves_taken", "2"), ("category", "INTERN"), ("salary", "abc"), ("name", None)],
)
def test_from_dict_rejects_bad_fields(field, value):
    data = Employee.create(1, "Alice", 5000, 0.1, EmployeeCategory.STANDARD).to_dict()
    data[field] = value
    with pytest.raises((KeyError, TypeError, ValueError)):
        Employee.from_dict(data)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Full-Time", EmployeeCategory.FULL_TIME),
        ("part time", EmployeeCategory.PART_TIME),
        ("STANDARD", EmployeeCategory.STANDARD),
        ("fulltime", EmployeeCategory.FULL_TIME),
        ("PART_TIME", EmployeeCategory.PART_TIME),
    ],
)
def test_category_parse(text, expected):
    assert EmployeeCategory.parse(text) is expected


@pytest.mark.parametrize("text", [None, "", "   "])
def test_category_parse_without_choice_is_cancelled(text):
    with pytest.raises(SelectionCancelled):
        EmployeeCategory.parse(text)


def test_category_parse_unknown():
    with pytest.raises(ParseError):
        EmployeeCategory.parse("Contractor")
