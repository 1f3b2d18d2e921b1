from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import DuplicatePolicy
from ..core.exceptions import ValidationError
from .strategies.base import DuplicateStrategy
from .strategies.retryable_strategy import RetryableDuplicateStrategy
from .strategies.strict_strategy import StrictDuplicateStrategy


@dataclass
class DuplicateStrategyFactory:
    """Factory Pattern: choose the duplicate strategy from configuration."""

    def for_policy(self, policy: DuplicatePolicy | str) -> DuplicateStrategy:
        if not isinstance(policy, DuplicatePolicy):
            try:
                policy = DuplicatePolicy(str(policy).strip().lower())
            except ValueError:
                raise ValidationError(f"Unknown duplicate policy: {policy!r}") from None

        if policy == DuplicatePolicy.STRICT:
            return StrictDuplicateStrategy()
        return RetryableDuplicateStrategy()
