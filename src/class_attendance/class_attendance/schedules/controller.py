from __future__ import annotations

from datetime import datetime

from flask import Flask, jsonify

from ..common.web import admin_required, current_role, json_body, login_required
from ..container import Container
from ..core.exceptions import ValidationError


def _schedule_to_json(s) -> dict:
    return {
        "id": s.schedule_id,
        "course_name": s.course_name,
        "class_id": s.class_id,
        "location_name": s.location.name,
        "start_time": s.start_time.isoformat(),
        "end_time": s.end_time.isoformat(),
    }


def _schedule_detail_to_json(s) -> dict:
    loc = s.location
    return {
        "id": s.schedule_id,
        "class_id": s.class_id,
        "class_name": s.class_name,
        "course_name": s.course_name,
        "start_time": s.start_time.isoformat(),
        "end_time": s.end_time.isoformat(),
        "location": {
            "id": loc.location_id,
            "name": loc.name,
            "latitude": loc.center.latitude,
            "longitude": loc.center.longitude,
            "radius": loc.radius_meters,
        },
    }


def _parse_datetime(value, field_name: str) -> datetime:
    try:
        parsed = datetime.fromisoformat(str(value))
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a valid date") from None
    # stored in naive DATETIME columns, compared against the naive local clock
    if parsed.tzinfo is not None:
        raise ValidationError(f"{field_name} must be a local time without a UTC offset")
    return parsed


def register(app: Flask, container: Container) -> None:
    @app.route("/api/v1/schedules/today", methods=["GET"], endpoint="api_today_schedules")
    @login_required
    def today_schedules():
        return jsonify({"data": [_schedule_to_json(s) for s in container.schedule_service.today()]})

    @app.route("/api/v1/schedules", methods=["GET"], endpoint="api_list_schedules")
    @admin_required
    def list_schedules():
        schedules = container.schedule_service.list_all(current_role=current_role())
        return jsonify({"data": [_schedule_detail_to_json(s) for s in schedules]})

    @app.route("/api/v1/schedules", methods=["POST"], endpoint="api_create_schedule")
    @admin_required
    def create_schedule():
        data = json_body()
        schedule_id = container.schedule_service.create(
            current_role=current_role(),
            location_id=data.get("location_id"),
            start_time=_parse_datetime(data.get("start_time"), "Start time"),
            end_time=_parse_datetime(data.get("end_time"), "End time"),
            course_id=data.get("course_id"),
            class_id=data.get("class_id"),
        )
        return jsonify({"id": schedule_id}), 201
