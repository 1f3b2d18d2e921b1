from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Optional

from ..common.datetime_utils import now_local
from ..common.validators import require_positive_id
from ..core.constants import DEFAULT_HISTORY_PER_PAGE, DISTANCE_DECIMALS
from ..core.enums import AttendanceStatus, Classification, RefusalReason
from ..core.exceptions import DuplicateAttendanceError, NotFoundError, ValidationError
from ..geo.distance import haversine_distance
from ..geo.model import GeoPoint
from ..schedules.model import Schedule
from ..schedules.repository import ScheduleRepository
from ..schedules.window import ScheduleWindow
from ..users.repository import EnrollmentRepository
from .model import AttendanceHistoryPage, AttendanceOutcome
from .repository import AttendanceRepository
from .strategies.base import DuplicateStrategy
from .strategies.retryable_strategy import RetryableDuplicateStrategy

logger = logging.getLogger(__name__)

MESSAGES = {
    Classification.ACCEPTED: "Attendance recorded",
    Classification.OUT_OF_RANGE: "Attendance rejected: position is outside the permitted radius",
    RefusalReason.NOT_ENROLLED: "You are not enrolled in the class of this schedule",
    RefusalReason.INACTIVE_WINDOW: "Attendance can only be submitted while the schedule is active",
    RefusalReason.DUPLICATE: "Attendance has already been submitted for this schedule",
}


class AttendanceService:
    """Decide and record attendance submissions.

    A submission moves through ``Received`` into exactly one terminal state:
    refused (not enrolled, inactive window, duplicate), accepted or out of
    range. Only the last two write a record.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        schedules: ScheduleRepository,
        enrollment: Optional[EnrollmentRepository] = None,
        *,
        window: Optional[ScheduleWindow] = None,
        duplicate_strategy: Optional[DuplicateStrategy] = None,
        require_enrollment: bool = False,
        clock: Callable[[], datetime] = now_local,
        history_per_page: int = DEFAULT_HISTORY_PER_PAGE,
    ):
        if require_enrollment and enrollment is None:
            raise ValueError("require_enrollment needs an enrollment repository")

        self._attendance = attendance
        self._schedules = schedules
        self._enrollment = enrollment
        self._window = window or ScheduleWindow()
        self._duplicates = duplicate_strategy or RetryableDuplicateStrategy()
        self._require_enrollment = bool(require_enrollment)
        self._clock = clock
        self._history_per_page = int(history_per_page)

    def evaluate(
        self,
        user_id: Any,
        schedule_id: Any,
        latitude: Any,
        longitude: Any,
        *,
        now: Optional[datetime] = None,
    ) -> AttendanceOutcome:
        """Classify one submission and persist it when it reaches the distance check.

        Raises ValidationError for malformed ids or coordinates and
        NotFoundError for an unknown schedule; every other result is
        returned as an outcome.
        """
        user_id = require_positive_id(user_id, "User ID")
        schedule_id = require_positive_id(schedule_id, "Schedule ID")
        point = GeoPoint.parse(latitude, longitude)

        schedule = self._schedules.get_by_id(schedule_id)
        if schedule is None:
            raise NotFoundError(f"Schedule {schedule_id} not found")

        now = now or self._clock()

        if self._require_enrollment and not self._is_enrolled(user_id, schedule):
            return self._refuse(RefusalReason.NOT_ENROLLED, user_id, schedule_id)

        if not self._window.is_active(now, schedule):
            return self._refuse(RefusalReason.INACTIVE_WINDOW, user_id, schedule_id)

        existing = self._attendance.find_existing(
            user_id=user_id,
            schedule_id=schedule_id,
            status=self._duplicates.blocking_status(),
        )
        if existing is not None:
            return self._refuse(RefusalReason.DUPLICATE, user_id, schedule_id)

        distance = haversine_distance(point, schedule.location.center)
        if distance <= schedule.location.radius_meters:
            classification, status = Classification.ACCEPTED, AttendanceStatus.PRESENT
        else:
            classification, status = Classification.OUT_OF_RANGE, AttendanceStatus.REJECTED

        try:
            record = self._attendance.insert(
                user_id=user_id,
                schedule_id=schedule_id,
                point=point,
                distance_meters=distance,
                status=status,
                created_at=now,
                attempt_guard=self._duplicates.attempt_guard(status),
            )
        except DuplicateAttendanceError:
            logger.warning("Concurrent attendance lost the race: user=%s schedule=%s", user_id, schedule_id)
            return self._refuse(RefusalReason.DUPLICATE, user_id, schedule_id)

        logger.info(
            "Attendance %s: user=%s schedule=%s distance=%.2fm radius=%.2fm",
            classification.value,
            user_id,
            schedule_id,
            distance,
            schedule.location.radius_meters,
        )
        return AttendanceOutcome(
            classification=classification,
            message=MESSAGES[classification],
            distance_meters=round(distance, DISTANCE_DECIMALS),
            record=record,
        )

    def history(self, user_id: Any, *, page: int = 1, per_page: Optional[int] = None) -> AttendanceHistoryPage:
        """A user's attendance records, newest first, one page at a time."""
        user_id = require_positive_id(user_id, "User ID")
        per_page = self._history_per_page if per_page is None else per_page
        if int(page) < 1 or int(per_page) < 1:
            raise ValidationError("page and per_page must be at least 1")

        page, per_page = int(page), int(per_page)
        items = self._attendance.list_history(user_id=user_id, limit=per_page, offset=(page - 1) * per_page)
        total = self._attendance.count_for_user(user_id)

        schedules = {}
        for schedule_id in {r.schedule_id for r in items}:
            schedule = self._schedules.get_by_id(schedule_id)
            if schedule is not None:
                schedules[schedule_id] = schedule

        return AttendanceHistoryPage(
            items=list(items),
            current_page=page,
            per_page=per_page,
            total=total,
            schedules=schedules,
        )

    def _is_enrolled(self, user_id: int, schedule: Schedule) -> bool:
        if schedule.class_id is None:
            return True
        return self._enrollment.is_enrolled(user_id=user_id, class_id=schedule.class_id)

    def _refuse(self, reason: RefusalReason, user_id: int, schedule_id: int) -> AttendanceOutcome:
        logger.info("Attendance refused (%s): user=%s schedule=%s", reason.value, user_id, schedule_id)
        return AttendanceOutcome(
            classification=Classification.REFUSED,
            message=MESSAGES[reason],
            reason=reason,
        )
