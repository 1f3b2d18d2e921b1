from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from .base import DuplicateStrategy


class RetryableDuplicateStrategy(DuplicateStrategy):
    """Out-of-range attempts may be resubmitted; only a present record blocks."""

    def blocking_status(self) -> Optional[AttendanceStatus]:
        return AttendanceStatus.PRESENT

    def attempt_guard(self, status: AttendanceStatus) -> Optional[int]:
        # NULL guards never collide in a unique index.
        return 1 if status == AttendanceStatus.PRESENT else None
