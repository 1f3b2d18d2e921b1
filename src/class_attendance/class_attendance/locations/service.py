from __future__ import annotations

from typing import Any

from ..common.validators import (
    require_latitude,
    require_longitude,
    require_non_empty,
    require_number_at_least,
    require_positive_id,
)
from ..core.constants import MIN_LOCATION_RADIUS_METERS
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError
from .repository import LocationRepository


class LocationService:
    def __init__(self, locations: LocationRepository):
        self._locations = locations

    def _validated(self, name: Any, latitude: Any, longitude: Any, radius_meters: Any) -> dict:
        return {
            "name": require_non_empty(name if isinstance(name, str) else "", "Location name"),
            "latitude": require_latitude(latitude),
            "longitude": require_longitude(longitude),
            "radius_meters": require_number_at_least(radius_meters, "Radius", MIN_LOCATION_RADIUS_METERS),
        }

    def list_all(self):
        return self._locations.list_all()

    def create(self, *, current_role: Role, name: Any, latitude: Any, longitude: Any, radius_meters: Any) -> int:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You are not allowed to manage locations")

        return self._locations.create(**self._validated(name, latitude, longitude, radius_meters))

    def update(
        self,
        *,
        current_role: Role,
        location_id: Any,
        name: Any,
        latitude: Any,
        longitude: Any,
        radius_meters: Any,
    ) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You are not allowed to manage locations")

        location_id = require_positive_id(location_id, "Location ID")
        fields = self._validated(name, latitude, longitude, radius_meters)
        if self._locations.get_by_id(location_id) is None:
            raise NotFoundError(f"Location {location_id} not found")

        # MySQL reports 0 affected rows when nothing changed, so rowcount is not checked.
        self._locations.update(location_id=location_id, **fields)
