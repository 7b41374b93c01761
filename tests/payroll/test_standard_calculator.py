import pytest

from payroll_desk.core.enums import EmployeeCategory
from payroll_desk.payroll.calculator.standard_calculator import StandardPayrollCalculator


@pytest.mark.parametrize(
    "category, expected",
    [
        (EmployeeCategory.STANDARD, 5000 - 500 - 200),
        (EmployeeCategory.FULL_TIME, 5000 - 500 - 300),
        (EmployeeCategory.PART_TIME, 5000 - 500 - 100),
    ],
)
def test_leave_deduction_depends_on_category(category, expected):
    calc = StandardPayrollCalculator()
    net = calc.net_salary(salary=5000, tax_rate=0.1, leaves_taken=2, category=category)
    assert net == pytest.approx(expected)


def test_tax_is_same_for_every_category():
    calc = StandardPayrollCalculator()
    for category in EmployeeCategory:
        assert calc.net_salary(salary=2000, tax_rate=0.25, leaves_taken=0, category=category) == pytest.approx(1500)


def test_net_salary_never_below_zero():
    calc = StandardPayrollCalculator()
    for category in EmployeeCategory:
        for leaves in range(0, 60, 7):
            assert calc.net_salary(salary=300, tax_rate=0.9, leaves_taken=leaves, category=category) >= 0


def test_clamps_to_zero():
    calc = StandardPayrollCalculator()
    assert calc.net_salary(salary=100, tax_rate=0.5, leaves_taken=1, category=EmployeeCategory.STANDARD) == 0
