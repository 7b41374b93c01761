"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the use cases live in the services.
"""

import importlib

from payroll_desk.config import get_settings_module
from payroll_desk.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_file=settings.DATA_FILE)
    employees = container.employee_service

    print(employees.load().message)
    print(employees.add_employee(1, "Alice", 5000, 0.1, "Full-Time").message)
    print(employees.mark_leave(1).message)
    employees.process_payroll()
    for employee in container.registry:
        print(employee)


if __name__ == "__main__":
    main()
