from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...core.enums import AttendanceStatus


class DuplicateStrategy(ABC):
    """Strategy Pattern: decide which earlier attempts block a new one."""

    @abstractmethod
    def blocking_status(self) -> Optional[AttendanceStatus]:
        """Status a prior record must have to block; None means any record blocks."""

        raise NotImplementedError

    @abstractmethod
    def attempt_guard(self, status: AttendanceStatus) -> Optional[int]:
        """Value stored in the unique ``attempt_guard`` column for a new row."""

        raise NotImplementedError
