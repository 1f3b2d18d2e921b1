from __future__ import annotations

from datetime import date, datetime
from typing import Optional

import pytest

from src.class_attendance.class_attendance.attendance.model import AttendanceRecord, AttendanceReportRow
from src.class_attendance.class_attendance.core.enums import AttendanceStatus
from src.class_attendance.class_attendance.core.exceptions import DuplicateAttendanceError
from src.class_attendance.class_attendance.geo.model import GeoPoint
from src.class_attendance.class_attendance.locations.model import Location
from src.class_attendance.class_attendance.schedules.model import Schedule

CAMPUS = Location(
    location_id=1,
    name="Gedung A - Fakultas Teknik",
    center=GeoPoint(latitude=-6.2, longitude=106.816666),
    radius_meters=100.0,
)


class InMemoryAttendance:
    def __init__(self, user_names: Optional[dict[int, str]] = None):
        self.records: list[AttendanceRecord] = []
        self._guards: set[tuple[int, int, int]] = set()
        self._user_names = user_names or {}
        self._id = 0

    def find_existing(self, *, user_id: int, schedule_id: int, status=None) -> Optional[AttendanceRecord]:
        matches = [
            r
            for r in self.records
            if r.user_id == user_id and r.schedule_id == schedule_id and (status is None or r.status == status)
        ]
        return matches[-1] if matches else None

    def insert(self, *, user_id, schedule_id, point, distance_meters, status, created_at, attempt_guard):
        if attempt_guard is not None:
            key = (user_id, schedule_id, attempt_guard)
            if key in self._guards:
                raise DuplicateAttendanceError("duplicate guard")
            self._guards.add(key)

        self._id += 1
        rec = AttendanceRecord(
            attendance_id=self._id,
            user_id=user_id,
            schedule_id=schedule_id,
            point=point,
            distance_meters=distance_meters,
            status=status,
            created_at=created_at,
        )
        self.records.append(rec)
        return rec

    def _newest_first(self, records):
        return sorted(records, key=lambda r: (r.created_at, r.attendance_id), reverse=True)

    def list_history(self, *, user_id: int, limit: int, offset: int):
        mine = self._newest_first(r for r in self.records if r.user_id == user_id)
        return mine[offset : offset + limit]

    def count_for_user(self, user_id: int) -> int:
        return sum(1 for r in self.records if r.user_id == user_id)

    def get_report_rows(self, *, start_date: Optional[date] = None, end_date: Optional[date] = None, schedule_id=None):
        rows = []
        for r in self._newest_first(self.records):
            if start_date is not None and r.created_at.date() < start_date:
                continue
            if end_date is not None and r.created_at.date() > end_date:
                continue
            if schedule_id is not None and r.schedule_id != schedule_id:
                continue
            rows.append(
                AttendanceReportRow(
                    attendance_id=r.attendance_id,
                    user_id=r.user_id,
                    user_name=self._user_names.get(r.user_id, f"user-{r.user_id}"),
                    user_email=None,
                    schedule_id=r.schedule_id,
                    course_name="Pemrograman Web",
                    status=r.status,
                    distance_meters=r.distance_meters,
                    created_at=r.created_at,
                )
            )
        return rows


class InMemorySchedules:
    def __init__(self, schedules: Optional[list[Schedule]] = None):
        self.schedules = {s.schedule_id: s for s in schedules or []}

    def get_by_id(self, schedule_id: int) -> Optional[Schedule]:
        return self.schedules.get(schedule_id)

    def list_for_date(self, work_date: date):
        found = [s for s in self.schedules.values() if s.start_time.date() == work_date]
        return sorted(found, key=lambda s: s.start_time)

    def list_all(self):
        return sorted(self.schedules.values(), key=lambda s: (s.start_time, s.schedule_id), reverse=True)

    def create(self, *, location_id, start_time, end_time, course_id=None, class_id=None) -> int:
        schedule_id = max(self.schedules, default=0) + 1
        self.schedules[schedule_id] = Schedule(
            schedule_id=schedule_id,
            location=CAMPUS,
            start_time=start_time,
            end_time=end_time,
            class_id=class_id,
        )
        return schedule_id


class InMemoryLocations:
    def __init__(self, locations: Optional[list[Location]] = None):
        self.locations = {loc.location_id: loc for loc in locations or []}

    def get_by_id(self, location_id: int) -> Optional[Location]:
        return self.locations.get(location_id)

    def list_all(self):
        return sorted(self.locations.values(), key=lambda loc: loc.name)

    def create(self, *, name, latitude, longitude, radius_meters) -> int:
        location_id = max(self.locations, default=0) + 1
        self.locations[location_id] = Location(location_id, name, GeoPoint(latitude, longitude), radius_meters)
        return location_id

    def update(self, *, location_id, name, latitude, longitude, radius_meters) -> bool:
        self.locations[location_id] = Location(location_id, name, GeoPoint(latitude, longitude), radius_meters)
        return True


class InMemoryEnrollment:
    def __init__(self, pairs: set[tuple[int, int]]):
        self.pairs = pairs

    def is_enrolled(self, *, user_id: int, class_id: int) -> bool:
        return (user_id, class_id) in self.pairs


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 8, 30, 0)


@pytest.fixture
def campus() -> Location:
    return CAMPUS


@pytest.fixture
def morning_schedule(fixed_now) -> Schedule:
    return Schedule(
        schedule_id=1,
        location=CAMPUS,
        start_time=fixed_now.replace(hour=8, minute=0),
        end_time=fixed_now.replace(hour=10, minute=0),
        course_name="Pemrograman Web",
        class_id=7,
    )


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance(user_names={1: "Budi", 2: "Siti"})


@pytest.fixture
def schedules_repo(morning_schedule) -> InMemorySchedules:
    return InMemorySchedules([morning_schedule])


@pytest.fixture
def locations_repo(campus) -> InMemoryLocations:
    return InMemoryLocations([campus])


class RacingAttendance(InMemoryAttendance):
    """Duplicate lookup always misses, as if another request inserted in between."""

    def find_existing(self, *, user_id: int, schedule_id: int, status=None):
        return None


@pytest.fixture
def racing_attendance_repo() -> RacingAttendance:
    return RacingAttendance()


@pytest.fixture
def enrollment() -> InMemoryEnrollment:
    # user 1 attends class 7; user 2 attends nothing
    return InMemoryEnrollment({(1, 7)})
