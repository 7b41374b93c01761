from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import NotFoundError, PersistenceError
from ..core.result import Result


def _respond(result: Result, *, ok_status: int = 200):
    status = ok_status
    if not result.ok:
        if isinstance(result.error, NotFoundError):
            status = 404
        elif isinstance(result.error, PersistenceError):
            status = 500
        else:
            status = 400

    body = {"ok": result.ok, "message": result.message}
    if result.data is not None:
        data = result.data
        body["data"] = data.as_dict() if hasattr(data, "as_dict") else data
    return jsonify(body), status


def register(app: Flask, container: Container) -> None:
    employees = container.employee_service
    payroll = container.payroll_service

    @app.get("/employees")
    def list_employees():
        return jsonify([view.as_dict() for view in employees.list_employees()])

    @app.get("/employees/<employee_id>")
    def get_employee(employee_id: str):
        return _respond(employees.get_employee(employee_id))

    @app.post("/employees")
    def add_employee():
        form = request.get_json(silent=True) or request.form
        result = employees.add_employee(
            form.get("id", ""),
            form.get("name", ""),
            form.get("salary", ""),
            form.get("tax_rate", ""),
            form.get("category"),
        )
        return _respond(result, ok_status=201)

    @app.post("/employees/<employee_id>/leave")
    def mark_leave(employee_id: str):
        return _respond(employees.mark_leave(employee_id))

    @app.post("/payroll/process")
    def process_payroll():
        employees.process_payroll()
        return jsonify({"ok": True, "message": "Payroll processed for all employees."})

    @app.get("/payroll/report")
    def payroll_report():
        report = payroll.build_report()
        return jsonify({"rows": report.rows, "summary": report.summary})

    @app.post("/data/save")
    def save_data():
        return _respond(employees.save())

    @app.post("/data/load")
    def load_data():
        return _respond(employees.load())
