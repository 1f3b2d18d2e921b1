"""Great-circle distance between two points using the Haversine formula."""

from __future__ import annotations

import math

from ..core.constants import EARTH_RADIUS_METERS
from .model import GeoPoint


def haversine_distance(a: GeoPoint, b: GeoPoint) -> float:
    """Distance in meters between ``a`` and ``b`` on a sphere of mean Earth radius.

    Both ``sin²`` terms are even functions of the deltas, so swapping the
    arguments yields the same value.
    """
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlat = lat2 - lat1
    dlon = math.radians(b.longitude) - math.radians(a.longitude)

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    # Rounding can push h a hair above 1 for antipodal points.
    h = min(1.0, h)
    return 2 * EARTH_RADIUS_METERS * math.asin(math.sqrt(h))


def is_within_radius(point: GeoPoint, center: GeoPoint, radius_meters: float) -> bool:
    return haversine_distance(point, center) <= radius_meters
