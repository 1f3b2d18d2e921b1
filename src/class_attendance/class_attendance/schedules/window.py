from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from ..core.constants import DEFAULT_TOLERANCE_MINUTES
from ..core.exceptions import ValidationError
from .model import Schedule


@dataclass(frozen=True)
class ScheduleWindow:
    """Inclusive ``[start, end]`` membership check, widened by a grace tolerance.

    The tolerance is applied symmetrically: a 5 minute tolerance opens the
    window 5 minutes before ``start_time`` and closes it 5 minutes after
    ``end_time``.
    """

    tolerance_minutes: int = DEFAULT_TOLERANCE_MINUTES

    def __post_init__(self) -> None:
        if isinstance(self.tolerance_minutes, bool) or not isinstance(self.tolerance_minutes, int):
            raise ValidationError("tolerance_minutes must be an integer")
        if self.tolerance_minutes < 0:
            raise ValidationError("tolerance_minutes must not be negative")

    def bounds(self, schedule: Schedule) -> tuple[datetime, datetime]:
        grace = timedelta(minutes=self.tolerance_minutes)
        return schedule.start_time - grace, schedule.end_time + grace

    def is_active(self, now: datetime, schedule: Schedule) -> bool:
        opens, closes = self.bounds(schedule)
        return opens <= now <= closes
