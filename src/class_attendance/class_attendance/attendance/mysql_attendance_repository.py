from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence

import mysql.connector

from ..core.enums import AttendanceStatus
from ..core.exceptions import DuplicateAttendanceError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_entry
from ..geo.model import GeoPoint
from .model import AttendanceRecord, AttendanceReportRow
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

_RECORD_COLUMNS = "attendance_id, user_id, schedule_id, latitude, longitude, distance, status, created_at"


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        user_id=int(r["user_id"]),
        schedule_id=int(r["schedule_id"]),
        point=GeoPoint(latitude=float(r["latitude"]), longitude=float(r["longitude"])),
        distance_meters=float(r["distance"]),
        status=AttendanceStatus(r["status"]),
        created_at=r["created_at"],
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_existing(
        self,
        *,
        user_id: int,
        schedule_id: int,
        status: Optional[AttendanceStatus] = None,
    ) -> Optional[AttendanceRecord]:
        clauses = ["user_id=%s", "schedule_id=%s"]
        params: list[object] = [int(user_id), int(schedule_id)]
        if status is not None:
            clauses.append("status=%s")
            params.append(status.value)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_RECORD_COLUMNS}
                FROM attendance_records
                WHERE {" AND ".join(clauses)}
                ORDER BY created_at DESC, attendance_id DESC
                LIMIT 1
                """,
                tuple(params),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def insert(
        self,
        *,
        user_id: int,
        schedule_id: int,
        point: GeoPoint,
        distance_meters: float,
        status: AttendanceStatus,
        created_at: datetime,
        attempt_guard: Optional[int],
    ) -> AttendanceRecord:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_records(
                        user_id, schedule_id, latitude, longitude, distance, status, attempt_guard, created_at
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        int(user_id),
                        int(schedule_id),
                        point.latitude,
                        point.longitude,
                        distance_meters,
                        status.value,
                        attempt_guard,
                        created_at,
                    ),
                )
                attendance_id = int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            if is_duplicate_entry(e):
                raise DuplicateAttendanceError(
                    f"Attendance already exists for user {user_id} and schedule {schedule_id}"
                ) from e
            raise

        logger.debug("Inserted attendance %s (user=%s schedule=%s)", attendance_id, user_id, schedule_id)
        return AttendanceRecord(
            attendance_id=attendance_id,
            user_id=int(user_id),
            schedule_id=int(schedule_id),
            point=point,
            distance_meters=distance_meters,
            status=status,
            created_at=created_at,
        )

    def list_history(self, *, user_id: int, limit: int, offset: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_RECORD_COLUMNS}
                FROM attendance_records
                WHERE user_id=%s
                ORDER BY created_at DESC, attendance_id DESC
                LIMIT %s OFFSET %s
                """,
                (int(user_id), int(limit), int(offset)),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def count_for_user(self, user_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM attendance_records WHERE user_id=%s", (int(user_id),))
            r = fetchone(cur)
            return int(r["total"]) if r else 0

    def get_report_rows(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        schedule_id: Optional[int] = None,
    ) -> Sequence[AttendanceReportRow]:
        clauses: list[str] = []
        params: list[object] = []

        if start_date is not None:
            clauses.append("DATE(ar.created_at) >= %s")
            params.append(start_date)
        if end_date is not None:
            clauses.append("DATE(ar.created_at) <= %s")
            params.append(end_date)
        if schedule_id is not None:
            clauses.append("ar.schedule_id=%s")
            params.append(int(schedule_id))

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    ar.attendance_id, ar.user_id, u.name AS user_name, u.email AS user_email,
                    ar.schedule_id, c.course_name,
                    ar.status, ar.distance, ar.created_at
                FROM attendance_records ar
                JOIN users u ON u.user_id = ar.user_id
                JOIN schedules sc ON sc.schedule_id = ar.schedule_id
                LEFT JOIN courses c ON c.course_id = sc.course_id
                {where}
                ORDER BY ar.created_at DESC, ar.attendance_id DESC
                """,
                tuple(params),
            )
            return [
                AttendanceReportRow(
                    attendance_id=int(r["attendance_id"]),
                    user_id=int(r["user_id"]),
                    user_name=r["user_name"],
                    user_email=r.get("user_email"),
                    schedule_id=int(r["schedule_id"]),
                    course_name=r.get("course_name"),
                    status=AttendanceStatus(r["status"]),
                    distance_meters=float(r["distance"]),
                    created_at=r["created_at"],
                )
                for r in fetchall(cur)
            ]
