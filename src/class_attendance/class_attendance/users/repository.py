from __future__ import annotations

from typing import Protocol


class EnrollmentRepository(Protocol):
    """Class membership lookup used by the optional enrollment gate."""

    def is_enrolled(self, *, user_id: int, class_id: int) -> bool:
        raise NotImplementedError
