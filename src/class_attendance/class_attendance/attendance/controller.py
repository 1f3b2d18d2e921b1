from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.web import json_body, login_required
from ..container import Container
from ..core.constants import DISTANCE_DECIMALS


def _schedule_summary(s) -> dict | None:
    if s is None:
        return None
    return {
        "id": s.schedule_id,
        "course_name": s.course_name,
        "start_time": s.start_time.isoformat(),
        "end_time": s.end_time.isoformat(),
    }


def _record_to_json(r, schedules) -> dict:
    return {
        "id": r.attendance_id,
        "schedule_id": r.schedule_id,
        "schedule": _schedule_summary(schedules.get(r.schedule_id)),
        "latitude": r.point.latitude,
        "longitude": r.point.longitude,
        "status": r.status.value,
        "distance": round(r.distance_meters, DISTANCE_DECIMALS),
        "created_at": r.created_at.isoformat(),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/v1/attendance", methods=["POST"], endpoint="api_submit_attendance")
    @login_required
    def submit_attendance():
        data = json_body()
        outcome = container.attendance_service.evaluate(
            session["user_id"],
            data.get("schedule_id"),
            data.get("latitude"),
            data.get("longitude"),
        )
        # Refusals are answered like the old API did: 422 with the same payload shape.
        return jsonify(outcome.to_payload()), 422 if outcome.is_refused else 200

    @app.route("/api/v1/attendance/history", methods=["GET"], endpoint="api_attendance_history")
    @login_required
    def attendance_history():
        page = container.attendance_service.history(
            session["user_id"],
            page=request.args.get("page", 1, type=int),
            per_page=request.args.get("per_page", type=int),
        )
        return jsonify({"data": [_record_to_json(r, page.schedules) for r in page.items], "meta": page.meta()})
