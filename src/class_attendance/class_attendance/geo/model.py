from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..common.validators import require_latitude, require_longitude


@dataclass(frozen=True)
class GeoPoint:
    """A position on Earth in decimal degrees."""

    latitude: float
    longitude: float

    @classmethod
    def parse(cls, latitude: Any, longitude: Any) -> "GeoPoint":
        """Build a point from raw input, raising ValidationError when out of range."""
        return cls(latitude=require_latitude(latitude), longitude=require_longitude(longitude))
