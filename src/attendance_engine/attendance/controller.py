from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..core.enums import EventType
from ..core.exceptions import InputValidationError


def register(app: Flask, container: Container) -> None:
    def _parse_date(value: str):
        try:
            return parse_iso_date(value)
        except ValueError:
            raise InputValidationError(f"Invalid date: {value}")

    @app.route("/attendance/events", methods=["POST"], endpoint="attendance_record")
    def attendance_record():
        data = request.get_json(silent=True) or {}
        user_id = str(data.get("user_id") or "").strip()
        if not user_id:
            raise InputValidationError("user_id is required")
        try:
            event_type = EventType(data.get("type"))
        except ValueError:
            raise InputValidationError("type must be check-in or check-out")

        event = container.attendance_service.record(
            user_id,
            event_type,
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
        )
        return jsonify({
            "success": True,
            "data": {
                "id": event.event_id,
                "userId": event.user_id,
                "timestamp": event.timestamp.isoformat(),
                "type": event.type.value,
            },
        }), 201

    @app.route("/attendance/<user_id>/days", methods=["GET"], endpoint="attendance_days")
    def attendance_days(user_id: str):
        start = _parse_date(request.args.get("start") or "")
        end = _parse_date(request.args.get("end") or "")
        records = container.attendance_service.daily_records(user_id, start, end)
        return jsonify({"success": True, "data": [r.to_dict() for r in records]})
