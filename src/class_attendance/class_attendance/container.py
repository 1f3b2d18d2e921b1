from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.factory import DuplicateStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_HISTORY_PER_PAGE, DEFAULT_TOLERANCE_MINUTES
from .core.enums import DuplicatePolicy
from .database.connection import DatabaseConnection, DBConfig
from .locations.mysql_location_repository import MySQLLocationRepository
from .locations.service import LocationService
from .reports.service import ReportService
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.service import ScheduleService
from .schedules.window import ScheduleWindow
from .users.mysql_enrollment_repository import MySQLEnrollmentRepository


@dataclass(frozen=True)
class Container:
    attendance_service: AttendanceService
    schedule_service: ScheduleService
    location_service: LocationService
    report_service: ReportService

    conn: Optional[DatabaseConnection] = None


def build_container(
    *,
    db_config: dict,
    tolerance_minutes: int = DEFAULT_TOLERANCE_MINUTES,
    duplicate_policy: DuplicatePolicy | str = DuplicatePolicy.RETRYABLE,
    require_enrollment: bool = False,
    history_per_page: int = DEFAULT_HISTORY_PER_PAGE,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    attendance_repo = MySQLAttendanceRepository(conn)
    schedules_repo = MySQLScheduleRepository(conn)
    locations_repo = MySQLLocationRepository(conn)
    enrollment_repo = MySQLEnrollmentRepository(conn)

    attendance_service = AttendanceService(
        attendance_repo,
        schedules_repo,
        enrollment_repo,
        window=ScheduleWindow(tolerance_minutes=int(tolerance_minutes)),
        duplicate_strategy=DuplicateStrategyFactory().for_policy(duplicate_policy),
        require_enrollment=require_enrollment,
        history_per_page=history_per_page,
    )

    return Container(
        attendance_service=attendance_service,
        schedule_service=ScheduleService(schedules_repo, locations_repo),
        location_service=LocationService(locations_repo),
        report_service=ReportService(attendance_repo),
        conn=conn,
    )
