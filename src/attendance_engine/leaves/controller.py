from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..core.enums import DayOption, LeaveType
from ..core.exceptions import InputValidationError


def register(app: Flask, container: Container) -> None:
    def _json_body() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise InputValidationError("Request body must be a JSON object")
        return data

    def _required(data: dict, key: str) -> str:
        value = str(data.get(key) or "").strip()
        if not value:
            raise InputValidationError(f"{key} is required")
        return value

    def _parse_date(value: str):
        try:
            return parse_iso_date(value)
        except ValueError:
            raise InputValidationError(f"Invalid date: {value}")

    @app.route("/leaves", methods=["GET"], endpoint="leaves_for_user")
    def leaves_for_user():
        user_id = (request.args.get("user") or "").strip()
        if not user_id:
            raise InputValidationError("user is required")
        items = container.leave_service.list_for_user(user_id)
        return jsonify({"success": True, "data": [r.to_dict() for r in items]})

    @app.route("/leaves/inbox", methods=["GET"], endpoint="leaves_inbox")
    def leaves_inbox():
        approver_id = (request.args.get("approver") or "").strip()
        if not approver_id:
            raise InputValidationError("approver is required")
        items = container.leave_service.list_for_approver(approver_id)
        return jsonify({"success": True, "data": [r.to_dict() for r in items]})

    @app.route("/leaves", methods=["POST"], endpoint="leaves_submit")
    def leaves_submit():
        data = _json_body()
        try:
            leave_type = LeaveType(_required(data, "leave_type"))
            day_option = DayOption(data["day_option"]) if data.get("day_option") else None
        except ValueError as e:
            raise InputValidationError(str(e))

        created = container.leave_service.submit(
            user_id=_required(data, "user_id"),
            leave_type=leave_type,
            start_date=_parse_date(_required(data, "start_date")),
            end_date=_parse_date(_required(data, "end_date")),
            reason=str(data.get("reason") or ""),
            day_option=day_option,
        )
        return jsonify({"success": True, "data": created.to_dict()}), 201

    @app.route("/leaves/<request_id>/approve", methods=["POST"], endpoint="leaves_approve")
    def leaves_approve(request_id: str):
        data = _json_body()
        updated = container.leave_service.approve(request_id, _required(data, "actor_id"), data.get("comments"))
        return jsonify({"success": True, "data": updated.to_dict()})

    @app.route("/leaves/<request_id>/reject", methods=["POST"], endpoint="leaves_reject")
    def leaves_reject(request_id: str):
        data = _json_body()
        updated = container.leave_service.reject(request_id, _required(data, "actor_id"), data.get("comments"))
        return jsonify({"success": True, "data": updated.to_dict()})

    @app.route("/leaves/balance/<user_id>", methods=["GET"], endpoint="leaves_balance")
    def leaves_balance(user_id: str):
        balance = container.leave_service.balance_for(user_id)
        return jsonify({"success": True, "data": balance.to_dict()})
