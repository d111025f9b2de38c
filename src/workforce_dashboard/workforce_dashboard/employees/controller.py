from __future__ import annotations

from flask import Flask, request

from ..common.responses import json_errors, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="api_employees")
    @json_errors
    def api_employees():
        return ok([e.to_dict() for e in container.employee_service.list_employees()])

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="api_employee")
    @json_errors
    def api_employee(employee_id: str):
        return ok(container.employee_service.get_employee(employee_id).to_dict())

    @app.route("/api/employees", methods=["POST"], endpoint="api_employees_create")
    @json_errors
    def api_employees_create():
        employee = container.employee_service.create_employee(request.get_json(silent=True) or {})
        return ok(employee.to_dict(), status=201, message="Employee added")

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="api_employees_update")
    @json_errors
    def api_employees_update(employee_id: str):
        employee = container.employee_service.update_employee(employee_id, request.get_json(silent=True) or {})
        return ok(employee.to_dict(), message="Employee updated")

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="api_employees_delete")
    @json_errors
    def api_employees_delete(employee_id: str):
        container.employee_service.delete_employee(employee_id)
        return ok(message="Employee deleted")
