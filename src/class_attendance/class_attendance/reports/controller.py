from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_optional_date
from ..common.web import admin_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/v1/reports/attendance", methods=["GET"], endpoint="api_attendance_report")
    @admin_required
    def attendance_report():
        report = container.report_service.build_attendance_report(
            start_date=parse_optional_date(request.args.get("start_date"), "Start date"),
            end_date=parse_optional_date(request.args.get("end_date"), "End date"),
            schedule_id=request.args.get("schedule_id") or None,
        )
        return jsonify({"data": report.rows, "summary": report.summary})
