from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..geo.model import GeoPoint
from ..locations.model import Location
from .model import Schedule
from .repository import ScheduleRepository

_SELECT_SCHEDULE = """
    SELECT
        sc.schedule_id, sc.start_time, sc.end_time, sc.class_id,
        c.course_name, cl.name AS class_name,
        l.location_id, l.name AS location_name, l.latitude, l.longitude, l.radius
    FROM schedules sc
    JOIN locations l ON l.location_id = sc.location_id
    LEFT JOIN courses c ON c.course_id = sc.course_id
    LEFT JOIN classes cl ON cl.class_id = sc.class_id
"""


def _to_schedule(r: Dict[str, Any]) -> Schedule:
    location = Location(
        location_id=int(r["location_id"]),
        name=r["location_name"],
        center=GeoPoint(latitude=float(r["latitude"]), longitude=float(r["longitude"])),
        radius_meters=float(r["radius"]),
    )
    return Schedule(
        schedule_id=int(r["schedule_id"]),
        location=location,
        start_time=r["start_time"],
        end_time=r["end_time"],
        course_name=r.get("course_name"),
        class_id=int(r["class_id"]) if r.get("class_id") is not None else None,
        class_name=r.get("class_name"),
    )


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, schedule_id: int) -> Optional[Schedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_SCHEDULE + " WHERE sc.schedule_id=%s", (int(schedule_id),))
            r = fetchone(cur)
            return _to_schedule(r) if r else None

    def list_for_date(self, work_date: date) -> Sequence[Schedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT_SCHEDULE + " WHERE DATE(sc.start_time)=%s ORDER BY sc.start_time ASC",
                (work_date,),
            )
            return [_to_schedule(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[Schedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_SCHEDULE + " ORDER BY sc.start_time DESC, sc.schedule_id DESC")
            return [_to_schedule(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        location_id: int,
        start_time: datetime,
        end_time: datetime,
        course_id: Optional[int] = None,
        class_id: Optional[int] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO schedules(course_id, class_id, location_id, start_time, end_time)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (course_id, class_id, int(location_id), start_time, end_time),
            )
            return int(cur.lastrowid)
