from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import ApiError, ValidationError
from ..container import Container
from .aggregator import filter_history
from .presentation import to_history_rows


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="api_attendance")
    def api_attendance():
        employee_id = request.args.get("employee_id", "")
        view = container.dashboard_service.refresh()
        records = filter_history(view.history, employee_id)

        payload = view.to_dict()
        payload.update({
            "success": view.error is None,
            "employee_id": employee_id or None,
            "employees": [{"employeeId": e.employee_id, "fullName": e.full_name} for e in view.roster],
            "records": to_history_rows(records),
        })
        return jsonify(payload), 200

    @app.route("/api/attendance", methods=["POST"], endpoint="api_attendance_create")
    def api_attendance_create():
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        try:
            if not isinstance(data, dict):
                raise ValidationError("Request body must be a JSON object")
            raw_date = data.get("date") or ""
            if not isinstance(raw_date, str):
                raise ValidationError("Date must use the YYYY-MM-DD format", field_errors={"date": ["Invalid date."]})
            raw_date = raw_date.strip()
            try:
                work_date = parse_iso_date(raw_date) if raw_date else None
            except ValueError:
                raise ValidationError("Date must use the YYYY-MM-DD format", field_errors={"date": ["Invalid date."]})

            record = container.attendance_service.mark_attendance(
                employee_id=data.get("employeeId", data.get("employee", "")),
                status=data.get("status", ""),
                work_date=work_date,
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e), "errors": e.field_errors}), 400
        except ApiError as e:
            return jsonify({"success": False, "message": str(e)}), 502

        return jsonify({
            "success": True,
            "message": "Attendance successfully recorded!",
            "record": to_history_rows([record])[0],
        }), 201
