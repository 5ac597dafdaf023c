from __future__ import annotations

from ...core.enums import DayStatus
from .base import DayContext, DayStrategy, StatusDecision


class HolidayStrategy(DayStrategy):
    def decide(self, day: DayContext) -> StatusDecision:
        return StatusDecision(status=DayStatus.HOLIDAY)
