from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_positive_id
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..locations.repository import LocationRepository
from .model import Schedule
from .repository import ScheduleRepository


class ScheduleService:
    def __init__(
        self,
        schedules: ScheduleRepository,
        locations: LocationRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._schedules = schedules
        self._locations = locations
        self._clock = clock

    def today(self, *, now: Optional[datetime] = None) -> Sequence[Schedule]:
        """Schedules starting today, earliest first."""
        now = now or self._clock()
        return self._schedules.list_for_date(now.date())

    def list_all(self, *, current_role: Role) -> Sequence[Schedule]:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You are not allowed to manage schedules")
        return self._schedules.list_all()

    def create(
        self,
        *,
        current_role: Role,
        location_id: Any,
        start_time: datetime,
        end_time: datetime,
        course_id: Any = None,
        class_id: Any = None,
    ) -> int:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You are not allowed to manage schedules")

        location_id = require_positive_id(location_id, "Location ID")
        if not isinstance(start_time, datetime) or not isinstance(end_time, datetime):
            raise ValidationError("Start time and end time must be valid datetimes")
        if start_time.tzinfo is not None or end_time.tzinfo is not None:
            raise ValidationError("Start time and end time must be local times without a UTC offset")
        if end_time <= start_time:
            raise ValidationError("End time must be after start time")
        if self._locations.get_by_id(location_id) is None:
            raise NotFoundError(f"Location {location_id} not found")

        return self._schedules.create(
            location_id=location_id,
            start_time=start_time,
            end_time=end_time,
            course_id=require_positive_id(course_id, "Course ID") if course_id is not None else None,
            class_id=require_positive_id(class_id, "Class ID") if class_id is not None else None,
        )
