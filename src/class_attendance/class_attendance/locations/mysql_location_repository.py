from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..geo.model import GeoPoint
from .model import Location
from .repository import LocationRepository


def _to_location(r: Dict[str, Any]) -> Location:
    return Location(
        location_id=int(r["location_id"]),
        name=r["name"],
        center=GeoPoint(latitude=float(r["latitude"]), longitude=float(r["longitude"])),
        radius_meters=float(r["radius"]),
    )


class MySQLLocationRepository(LocationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, location_id: int) -> Optional[Location]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT location_id, name, latitude, longitude, radius FROM locations WHERE location_id=%s",
                (int(location_id),),
            )
            r = fetchone(cur)
            return _to_location(r) if r else None

    def list_all(self) -> Sequence[Location]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT location_id, name, latitude, longitude, radius FROM locations ORDER BY name ASC")
            return [_to_location(r) for r in fetchall(cur)]

    def create(self, *, name: str, latitude: float, longitude: float, radius_meters: float) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO locations(name, latitude, longitude, radius) VALUES(%s,%s,%s,%s)",
                (name, latitude, longitude, radius_meters),
            )
            return int(cur.lastrowid)

    def update(self, *, location_id: int, name: str, latitude: float, longitude: float, radius_meters: float) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE locations
                SET name=%s, latitude=%s, longitude=%s, radius=%s
                WHERE location_id=%s
                """,
                (name, latitude, longitude, radius_meters, int(location_id)),
            )
            return cur.rowcount > 0
