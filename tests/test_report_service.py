from __future__ import annotations

from datetime import date, datetime

import pytest

from src.class_attendance.class_attendance.core.enums import AttendanceStatus
from src.class_attendance.class_attendance.core.exceptions import ValidationError
from src.class_attendance.class_attendance.geo.model import GeoPoint
from src.class_attendance.class_attendance.reports.service import ReportService


class FakeAttendanceRepo:
    def __init__(self, rows):
        self._rows = rows
        self.last_args = None

    def get_report_rows(self, *, start_date=None, end_date=None, schedule_id=None):
        self.last_args = {"start_date": start_date, "end_date": end_date, "schedule_id": schedule_id}
        return self._rows


def _seed(repo):
    entries = [
        (1, 1, AttendanceStatus.PRESENT, datetime(2026, 1, 30, 8, 0)),
        (2, 1, AttendanceStatus.REJECTED, datetime(2026, 1, 31, 8, 0)),
        (1, 2, AttendanceStatus.PRESENT, datetime(2026, 1, 31, 23, 59)),
        (2, 2, AttendanceStatus.PRESENT, datetime(2026, 2, 1, 0, 0)),
    ]
    for user_id, schedule_id, status, created_at in entries:
        repo.insert(
            user_id=user_id,
            schedule_id=schedule_id,
            point=GeoPoint(-6.2, 106.816666),
            distance_meters=12.3456,
            status=status,
            created_at=created_at,
            attempt_guard=None,
        )


def test_report_without_filters_returns_everything_newest_first(attendance_repo):
    _seed(attendance_repo)

    rows = ReportService(attendance_repo).report()

    assert [r.created_at for r in rows] == sorted((r.created_at for r in rows), reverse=True)
    assert len(rows) == 4


def test_report_date_bounds_are_inclusive(attendance_repo):
    _seed(attendance_repo)
    svc = ReportService(attendance_repo)

    rows = svc.report(start_date=date(2026, 1, 31), end_date=date(2026, 1, 31))

    assert {r.created_at for r in rows} == {datetime(2026, 1, 31, 8, 0), datetime(2026, 1, 31, 23, 59)}


def test_report_filters_are_a_conjunction(attendance_repo):
    _seed(attendance_repo)
    svc = ReportService(attendance_repo)

    rows = svc.report(start_date=date(2026, 1, 31), schedule_id=2)

    assert [(r.user_id, r.schedule_id) for r in rows] == [(2, 2), (1, 2)]


def test_report_with_only_upper_bound(attendance_repo):
    _seed(attendance_repo)

    rows = ReportService(attendance_repo).report(end_date=date(2026, 1, 30))

    assert [r.user_id for r in rows] == [1]


def test_report_forwards_filters():
    repo = FakeAttendanceRepo([])

    ReportService(repo).report(start_date=date(2026, 1, 1), schedule_id="7")

    assert repo.last_args == {"start_date": date(2026, 1, 1), "end_date": None, "schedule_id": 7}


def test_report_rejects_inverted_range():
    with pytest.raises(ValidationError):
        ReportService(FakeAttendanceRepo([])).report(start_date=date(2026, 2, 1), end_date=date(2026, 1, 1))


def test_build_report_rows_and_summary(attendance_repo):
    _seed(attendance_repo)

    report = ReportService(attendance_repo).build_attendance_report(schedule_id=1)

    assert report.summary == {"total": 2, "present": 1, "rejected": 1}
    assert report.rows[0]["user"]["name"] == "Siti"
    assert report.rows[0]["distance"] == 12.35
    assert report.rows[0]["status"] == "rejected"
