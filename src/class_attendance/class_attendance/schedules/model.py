from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..locations.model import Location


@dataclass(frozen=True)
class Schedule:
    """One bounded attendance opportunity.

    Storage resolves the location once and hands it over by value, so the
    decision engine never reaches back into the database for related rows.
    """

    schedule_id: int
    location: Location
    start_time: datetime
    end_time: datetime
    course_name: Optional[str] = None
    class_id: Optional[int] = None
    class_name: Optional[str] = None
