from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.request_utils import json_object_body
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="api_attendance_day")
    def api_attendance_day():
        """Attendance sheet for one day (defaults to today)."""
        try:
            day = parse_iso_date(request.args.get("date") or date.today().isoformat())
        except ValueError:
            return jsonify({"success": False, "message": "date must be YYYY-MM-DD"}), 400
        rows = container.attendance_service.get_day_sheet(day)
        return jsonify({"success": True, "date": day.isoformat(), "rows": rows})

    @app.route("/api/attendance", methods=["POST"], endpoint="api_attendance_record")
    def api_attendance_record():
        try:
            record = container.attendance_service.record_attendance(json_object_body())
            return jsonify({"success": True, "record": record.to_dict()})
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

    @app.route("/api/attendance/import", methods=["POST"], endpoint="api_attendance_import")
    def api_attendance_import():
        documents = request.get_json(silent=True)
        if not isinstance(documents, list):
            return jsonify({"success": False, "message": "Expected a JSON list of attendance records"}), 400
        try:
            imported = container.attendance_service.import_records(documents)
            return jsonify({"success": True, "imported": imported})
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

    @app.route("/api/attendance/<record_id>", methods=["PATCH"], endpoint="api_attendance_update")
    def api_attendance_update(record_id: str):
        try:
            record = container.attendance_service.update_record(record_id, json_object_body())
            return jsonify({"success": True, "record": record.to_dict()})
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

    @app.route("/api/attendance/<record_id>", methods=["DELETE"], endpoint="api_attendance_delete")
    def api_attendance_delete(record_id: str):
        try:
            container.attendance_service.delete_record(record_id)
            return jsonify({"success": True})
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
