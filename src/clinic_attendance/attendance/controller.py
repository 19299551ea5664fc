from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..auth.guard import token_required
from ..common.http import json_body
from ..common.validators import parse_positive_int
from ..container import Container
from ..core.constants import DEFAULT_HISTORY_LIMIT, DEFAULT_PAGE_LIMIT
from ..core.enums import AttendanceAction


def register(app: Flask, container: Container) -> None:
    staff_token_required = token_required(container.staff_tokens, subject_claim="staffId")

    @app.route("/api/attendance/mark", methods=["POST"], endpoint="attendance_mark")
    @staff_token_required
    def mark_attendance():
        payload = json_body()
        record = container.attendance_service.mark_attendance(
            payload.get("staffId"),
            payload.get("action"),
            payload.get("location"),
            payload.get("clinicId"),
            auth_staff_id=g.token_claims.get("staffId"),
        )
        label = "Check-in" if record.action == AttendanceAction.CHECK_IN else "Check-out"
        return jsonify({
            "success": True,
            "message": f"{label} successful! Distance: {round(record.distance)}m from {record.clinic_name}",
            "record": record.to_dict(),
        }), 200

    @app.route("/api/attendance/history/<staff_id>", methods=["GET"], endpoint="attendance_history")
    @staff_token_required
    def attendance_history(staff_id: str):
        limit = parse_positive_int(request.args.get("limit"), "limit", default=DEFAULT_HISTORY_LIMIT)
        records = container.attendance_service.get_history(staff_id, limit=limit)
        return jsonify({"success": True, "records": [r.to_dict() for r in records]}), 200

    @app.route("/api/attendance/all", methods=["GET"], endpoint="attendance_all")
    @staff_token_required
    def attendance_all():
        page = parse_positive_int(request.args.get("page"), "page", default=1)
        limit = parse_positive_int(request.args.get("limit"), "limit", default=DEFAULT_PAGE_LIMIT)
        result = container.attendance_service.get_all(page=page, limit=limit)
        return jsonify({"success": True, **result.to_dict()}), 200
