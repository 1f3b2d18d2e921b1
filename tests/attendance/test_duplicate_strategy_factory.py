import pytest

from src.class_attendance.class_attendance.attendance.factory import DuplicateStrategyFactory
from src.class_attendance.class_attendance.attendance.strategies.retryable_strategy import RetryableDuplicateStrategy
from src.class_attendance.class_attendance.attendance.strategies.strict_strategy import StrictDuplicateStrategy
from src.class_attendance.class_attendance.core.enums import AttendanceStatus, DuplicatePolicy
from src.class_attendance.class_attendance.core.exceptions import ValidationError


def test_factory_picks_strategy_from_policy():
    factory = DuplicateStrategyFactory()

    assert isinstance(factory.for_policy(DuplicatePolicy.STRICT), StrictDuplicateStrategy)
    assert isinstance(factory.for_policy("Strict "), StrictDuplicateStrategy)
    assert isinstance(factory.for_policy(DuplicatePolicy.RETRYABLE), RetryableDuplicateStrategy)
    assert isinstance(factory.for_policy("retryable"), RetryableDuplicateStrategy)


def test_factory_rejects_unknown_policy():
    with pytest.raises(ValidationError):
        DuplicateStrategyFactory().for_policy("lenient")


def test_strict_guards_every_attempt():
    strategy = StrictDuplicateStrategy()

    assert strategy.blocking_status() is None
    assert strategy.attempt_guard(AttendanceStatus.PRESENT) == 1
    assert strategy.attempt_guard(AttendanceStatus.REJECTED) == 1


def test_retryable_guards_only_present_attempts():
    strategy = RetryableDuplicateStrategy()

    assert strategy.blocking_status() == AttendanceStatus.PRESENT
    assert strategy.attempt_guard(AttendanceStatus.PRESENT) == 1
    assert strategy.attempt_guard(AttendanceStatus.REJECTED) is None
