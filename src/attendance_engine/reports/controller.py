from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date, parse_month
from ..container import Container
from ..core.enums import ReportPeriod
from ..core.exceptions import InputValidationError
from .export import custom_log_csv, muster_csv, muster_excel


def register(app: Flask, container: Container) -> None:
    def _parse_date(value: Optional[str]):
        if not value:
            return None
        try:
            return parse_iso_date(value)
        except ValueError:
            raise InputValidationError(f"Invalid date: {value}")

    def _selected_users() -> Optional[list[str]]:
        # "all" (or nothing) means every employee
        user = (request.args.get("user") or "all").strip()
        return None if user == "all" else [user]

    def _download(payload: bytes, *, mimetype: str, filename: str):
        return app.response_class(
            payload,
            mimetype=mimetype,
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    def _month_arg():
        raw = request.args.get("month") or ""
        try:
            return parse_month(raw)
        except ValueError:
            raise InputValidationError("month must be given as YYYY-MM")

    @app.route("/reports/dashboard", methods=["GET"], endpoint="reports_dashboard")
    def dashboard():
        data = container.report_service.dashboard(today=_parse_date(request.args.get("date")))
        return jsonify({"success": True, "data": data.to_dict()})

    @app.route("/reports/muster.csv", methods=["GET"], endpoint="reports_muster_csv")
    def muster_as_csv():
        month = _month_arg()
        rows = container.report_service.monthly_muster(month, user_ids=_selected_users())
        return _download(
            muster_csv(rows, month).encode("utf-8-sig"),
            mimetype="text/csv",
            filename=f"muster_{month:%Y_%m}.csv",
        )

    @app.route("/reports/muster.xlsx", methods=["GET"], endpoint="reports_muster_xlsx")
    def muster_as_excel():
        month = _month_arg()
        rows = container.report_service.monthly_muster(month, user_ids=_selected_users())
        return _download(
            muster_excel(rows, month),
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            filename=f"muster_{month:%Y_%m}.xlsx",
        )

    @app.route("/reports/log.csv", methods=["GET"], endpoint="reports_log_csv")
    def log_as_csv():
        raw_period = request.args.get("period") or ReportPeriod.DAILY.value
        try:
            period = ReportPeriod(raw_period)
        except ValueError:
            raise InputValidationError(f"Unknown report period: {raw_period}")

        rows = container.report_service.custom_log(
            period,
            picked=_parse_date(request.args.get("date")),
            start=_parse_date(request.args.get("start")),
            end=_parse_date(request.args.get("end")),
            user_ids=_selected_users(),
        )
        return _download(
            custom_log_csv(rows).encode("utf-8-sig"),
            mimetype="text/csv",
            filename=f"attendance_log_{period.value}.csv",
        )
