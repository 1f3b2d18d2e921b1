from datetime import timedelta

import pytest

from src.class_attendance.class_attendance.attendance.service import AttendanceService
from src.class_attendance.class_attendance.core.enums import AttendanceStatus
from src.class_attendance.class_attendance.core.exceptions import ValidationError
from src.class_attendance.class_attendance.geo.model import GeoPoint


def _seed(repo, user_id, created_ats):
    for created_at in created_ats:
        repo.insert(
            user_id=user_id,
            schedule_id=1,
            point=GeoPoint(-6.2, 106.816666),
            distance_meters=0.0,
            status=AttendanceStatus.REJECTED,
            created_at=created_at,
            attempt_guard=None,
        )


def test_history_is_newest_first_and_per_user(attendance_repo, schedules_repo, fixed_now):
    _seed(attendance_repo, 1, [fixed_now - timedelta(days=d) for d in (3, 1, 2)])
    _seed(attendance_repo, 2, [fixed_now])
    svc = AttendanceService(attendance_repo, schedules_repo)

    page = svc.history(1)

    assert [r.created_at for r in page.items] == [fixed_now - timedelta(days=d) for d in (1, 2, 3)]
    assert all(r.user_id == 1 for r in page.items)
    assert page.meta() == {"current_page": 1, "last_page": 1, "per_page": 15, "total": 3}


def test_history_pages_are_restartable(attendance_repo, schedules_repo, fixed_now):
    _seed(attendance_repo, 1, [fixed_now - timedelta(hours=h) for h in range(5)])
    svc = AttendanceService(attendance_repo, schedules_repo, history_per_page=2)

    first = svc.history(1)
    second = svc.history(1, page=2)
    third = svc.history(1, page=3)

    assert first.last_page == 3
    assert [len(p.items) for p in (first, second, third)] == [2, 2, 1]
    ids = [r.attendance_id for p in (first, second, third) for r in p.items]
    assert len(set(ids)) == 5
    assert [r.attendance_id for r in svc.history(1).items] == [r.attendance_id for r in first.items]


def test_history_for_user_without_records_is_empty(attendance_repo, schedules_repo):
    page = AttendanceService(attendance_repo, schedules_repo).history(42)

    assert page.items == []
    assert page.total == 0
    assert page.last_page == 1


@pytest.mark.parametrize("page, per_page", [(0, 15), (1, 0), (-1, 5)])
def test_history_rejects_bad_pagination(attendance_repo, schedules_repo, page, per_page):
    with pytest.raises(ValidationError):
        AttendanceService(attendance_repo, schedules_repo).history(1, page=page, per_page=per_page)


def test_history_page_carries_the_referenced_schedules(attendance_repo, schedules_repo, morning_schedule, fixed_now):
    _seed(attendance_repo, 1, [fixed_now])
    attendance_repo.insert(
        user_id=1,
        schedule_id=404,
        point=GeoPoint(-6.2, 106.816666),
        distance_meters=0.0,
        status=AttendanceStatus.REJECTED,
        created_at=fixed_now - timedelta(days=1),
        attempt_guard=None,
    )

    page = AttendanceService(attendance_repo, schedules_repo).history(1)

    assert page.schedules == {1: morning_schedule}
