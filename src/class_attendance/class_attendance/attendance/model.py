from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from ..core.enums import AttendanceStatus, Classification, RefusalReason
from ..geo.model import GeoPoint
from ..schedules.model import Schedule


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one stored attendance attempt.

    ``distance_meters`` is the full-precision distance computed when the
    attempt was evaluated and never changes afterwards.
    """

    attendance_id: int
    user_id: int
    schedule_id: int
    point: GeoPoint
    distance_meters: float
    status: AttendanceStatus
    created_at: datetime


@dataclass(frozen=True)
class AttendanceOutcome:
    """Result of evaluating one submission."""

    classification: Classification
    message: str
    distance_meters: Optional[float] = None
    reason: Optional[RefusalReason] = None
    record: Optional[AttendanceRecord] = field(default=None, compare=False)

    @property
    def is_refused(self) -> bool:
        return self.classification == Classification.REFUSED

    def to_payload(self) -> dict[str, Any]:
        return {
            "classification": self.classification.value,
            "distance_meters": self.distance_meters,
            "reason_code": self.reason.value if self.reason else None,
            "message": self.message,
        }


@dataclass(frozen=True)
class AttendanceHistoryPage:
    """One page of a user's records plus the schedules they refer to."""

    items: Sequence[AttendanceRecord]
    current_page: int
    per_page: int
    total: int
    schedules: Mapping[int, Schedule] = field(default_factory=dict)

    @property
    def last_page(self) -> int:
        return max(1, math.ceil(self.total / self.per_page))

    def meta(self) -> dict[str, int]:
        return {
            "current_page": self.current_page,
            "last_page": self.last_page,
            "per_page": self.per_page,
            "total": self.total,
        }


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for reports (joined with user and schedule)."""

    attendance_id: int
    user_id: int
    user_name: str
    user_email: Optional[str]
    schedule_id: int
    course_name: Optional[str]
    status: AttendanceStatus
    distance_meters: float
    created_at: datetime
