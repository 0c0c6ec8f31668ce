from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import ApiError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="api_employees")
    def api_employees():
        try:
            employees = container.employee_service.list_employees()
        except ApiError as e:
            logger.error("Failed to load employees: %s", e)
            return jsonify({
                "success": False,
                "message": "Failed to load employees. Please make sure the backend server is running.",
            }), 502
        return jsonify({"success": True, "employees": [{**e.to_json(), "initials": e.initials} for e in employees]}), 200

    @app.route("/api/employees", methods=["POST"], endpoint="api_employees_create")
    def api_employees_create():
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        try:
            if not isinstance(data, dict):
                raise ValidationError("Request body must be a JSON object")
            employee = container.employee_service.register_employee(
                employee_id=data.get("employeeId", ""),
                full_name=data.get("fullName", ""),
                email=data.get("email", ""),
                department=data.get("department", ""),
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e), "errors": e.field_errors}), 400
        except ApiError as e:
            return jsonify({"success": False, "message": str(e)}), 502
        return jsonify({"success": True, "employee": employee.to_json()}), 201

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="api_employees_delete")
    def api_employees_delete(employee_id: str):
        try:
            container.employee_service.delete_employee(employee_id)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except ApiError as e:
            return jsonify({"success": False, "message": str(e)}), 502
        return jsonify({"success": True}), 200
