from __future__ import annotations

from ...core.enums import DayStatus
from .base import DayContext, DayStrategy, StatusDecision


class WeekendStrategy(DayStrategy):
    """Weekly off. Only Sunday qualifies; Saturday is a normal workday."""

    def decide(self, day: DayContext) -> StatusDecision:
        return StatusDecision(status=DayStatus.WEEKEND)
