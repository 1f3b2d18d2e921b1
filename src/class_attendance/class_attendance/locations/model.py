from __future__ import annotations

from dataclasses import dataclass

from ..geo.model import GeoPoint


@dataclass(frozen=True)
class Location:
    """A place where class sessions are held, with its permitted radius."""

    location_id: int
    name: str
    center: GeoPoint
    radius_meters: float
