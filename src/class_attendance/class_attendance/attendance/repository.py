from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from ..geo.model import GeoPoint
from .model import AttendanceRecord, AttendanceReportRow


class AttendanceRepository(Protocol):
    def find_existing(
        self,
        *,
        user_id: int,
        schedule_id: int,
        status: Optional[AttendanceStatus] = None,
    ) -> Optional[AttendanceRecord]:
        """Latest record for the pair, optionally restricted to one status."""

        raise NotImplementedError

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
        """Persist a record.

        Rows sharing ``(user_id, schedule_id, attempt_guard)`` with a non-null
        guard are rejected with DuplicateAttendanceError.
        """

        raise NotImplementedError

    def list_history(self, *, user_id: int, limit: int, offset: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def count_for_user(self, user_id: int) -> int:
        raise NotImplementedError

    def get_report_rows(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        schedule_id: Optional[int] = None,
    ) -> Sequence[AttendanceReportRow]:
        raise NotImplementedError
