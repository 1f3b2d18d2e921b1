from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import Schedule


class ScheduleRepository(Protocol):
    def get_by_id(self, schedule_id: int) -> Optional[Schedule]:
        """Return the schedule with its location resolved, or None."""

        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[Schedule]:
        """Schedules starting on ``work_date``, ordered by start time."""

        raise NotImplementedError

    def list_all(self) -> Sequence[Schedule]:
        """Every schedule, latest start first."""

        raise NotImplementedError

    def create(
        self,
        *,
        location_id: int,
        start_time: datetime,
        end_time: datetime,
        course_id: Optional[int] = None,
        class_id: Optional[int] = None,
    ) -> int:
        raise NotImplementedError
