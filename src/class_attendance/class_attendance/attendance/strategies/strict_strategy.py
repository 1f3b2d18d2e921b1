from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from .base import DuplicateStrategy


class StrictDuplicateStrategy(DuplicateStrategy):
    """One attempt per user and schedule, whatever its outcome."""

    def blocking_status(self) -> Optional[AttendanceStatus]:
        return None

    def attempt_guard(self, status: AttendanceStatus) -> Optional[int]:
        return 1
