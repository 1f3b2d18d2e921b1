from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Sequence

from ..attendance.model import AttendanceReportRow
from ..attendance.repository import AttendanceRepository
from ..common.validators import require_positive_id
from ..core.constants import DISTANCE_DECIMALS
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: dict


class ReportService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def report(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        schedule_id: Any = None,
    ) -> Sequence[AttendanceReportRow]:
        """Records passing every supplied filter, newest first.

        Date bounds are inclusive and compare against the record's creation
        date. A filter left as None does not constrain the result.
        """
        if start_date is not None and end_date is not None and end_date < start_date:
            raise ValidationError("End date must be after or equal to start date")
        if schedule_id is not None:
            schedule_id = require_positive_id(schedule_id, "Schedule ID")

        return self._attendance.get_report_rows(start_date=start_date, end_date=end_date, schedule_id=schedule_id)

    def build_attendance_report(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        schedule_id: Any = None,
    ) -> ReportData:
        rows = self.report(start_date=start_date, end_date=end_date, schedule_id=schedule_id)

        out_rows = [
            {
                "id": r.attendance_id,
                "user": {"id": r.user_id, "name": r.user_name, "email": r.user_email},
                "schedule": {"id": r.schedule_id, "course_name": r.course_name},
                "status": r.status.value,
                "distance": round(r.distance_meters, DISTANCE_DECIMALS),
                "created_at": r.created_at.isoformat(),
            }
            for r in rows
        ]
        present = sum(1 for r in rows if r.status == AttendanceStatus.PRESENT)
        summary = {"total": len(rows), "present": present, "rejected": len(rows) - present}
        return ReportData(rows=out_rows, summary=summary)
