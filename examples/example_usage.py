"""Example: drive the decision engine through the service layer (no Flask).

Controllers are a thin layer; the attendance rules live in the services.
"""

import importlib
import sys

from config import get_settings_module

from src.class_attendance.class_attendance.container import build_container
from src.class_attendance.class_attendance.core.exceptions import DomainError


def main(user_id: int, schedule_id: int, latitude: float, longitude: float) -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        tolerance_minutes=settings.ATTENDANCE_TOLERANCE_MINUTES,
        duplicate_policy=settings.ATTENDANCE_DUPLICATE_POLICY,
        require_enrollment=settings.ATTENDANCE_REQUIRE_ENROLLMENT,
    )
    try:
        outcome = container.attendance_service.evaluate(user_id, schedule_id, latitude, longitude)
    except DomainError as e:
        print(f"error: {e}")
        sys.exit(1)
    print(outcome.to_payload())


if __name__ == "__main__":
    # e.g. python -m examples.example_usage 1 1 -6.2 106.816666
    uid, sid, lat, lon = sys.argv[1:5]
    main(int(uid), int(sid), float(lat), float(lon))
