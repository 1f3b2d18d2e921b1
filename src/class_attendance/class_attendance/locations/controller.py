from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, current_role, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/v1/locations", methods=["GET"], endpoint="api_list_locations")
    @admin_required
    def list_locations():
        data = [
            {
                "id": loc.location_id,
                "name": loc.name,
                "latitude": loc.center.latitude,
                "longitude": loc.center.longitude,
                "radius": loc.radius_meters,
            }
            for loc in container.location_service.list_all()
        ]
        return jsonify({"data": data})

    @app.route("/api/v1/locations", methods=["POST"], endpoint="api_create_location")
    @admin_required
    def create_location():
        data = json_body()
        location_id = container.location_service.create(
            current_role=current_role(),
            name=data.get("name"),
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
            radius_meters=data.get("radius"),
        )
        return jsonify({"id": location_id}), 201

    @app.route("/api/v1/locations/<int:location_id>", methods=["PUT"], endpoint="api_update_location")
    @admin_required
    def update_location(location_id: int):
        data = json_body()
        container.location_service.update(
            current_role=current_role(),
            location_id=location_id,
            name=data.get("name"),
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
            radius_meters=data.get("radius"),
        )
        return jsonify({"id": location_id})
