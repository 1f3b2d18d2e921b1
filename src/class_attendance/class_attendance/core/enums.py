from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for access control."""

    ADMIN = "admin"
    STUDENT = "mahasiswa"


class AttendanceStatus(str, Enum):
    """Status stored with an attendance record."""

    PRESENT = "present"
    REJECTED = "rejected"


class Classification(str, Enum):
    """Classification returned to the caller for one submission."""

    ACCEPTED = "accepted"
    OUT_OF_RANGE = "out_of_range"
    REFUSED = "refused"


class RefusalReason(str, Enum):
    NOT_ENROLLED = "not_enrolled"
    INACTIVE_WINDOW = "inactive_window"
    DUPLICATE = "duplicate"


class DuplicatePolicy(str, Enum):
    """Which prior attempts block a new submission for the same schedule."""

    STRICT = "strict"
    RETRYABLE = "retryable"
