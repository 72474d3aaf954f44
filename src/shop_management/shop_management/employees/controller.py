from __future__ import annotations

from flask import Flask, jsonify

from ..common.request_utils import json_object_body
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="api_employees")
    def api_employees():
        employees = container.employee_service.list_employees()
        return jsonify({"success": True, "employees": [e.to_dict() for e in employees]})

    @app.route("/api/employees", methods=["POST"], endpoint="api_employees_create")
    def api_employees_create():
        try:
            employee = container.employee_service.create_employee(json_object_body())
            return jsonify({"success": True, "employee": employee.to_dict()}), 201
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="api_employee_detail")
    def api_employee_detail(employee_id: str):
        try:
            employee = container.employee_service.get_employee(employee_id)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        records = container.attendance_service.list_for_employee(employee_id)
        return jsonify(
            {
                "success": True,
                "employee": employee.to_dict(),
                "attendance": [r.to_dict() for r in records],
            }
        )

    @app.route("/api/employees/<employee_id>", methods=["PATCH", "PUT"], endpoint="api_employee_update")
    def api_employee_update(employee_id: str):
        try:
            employee = container.employee_service.update_employee(employee_id, json_object_body())
            return jsonify({"success": True, "employee": employee.to_dict()})
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="api_employee_delete")
    def api_employee_delete(employee_id: str):
        try:
            container.employee_service.delete_employee(employee_id)
            return jsonify({"success": True})
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
