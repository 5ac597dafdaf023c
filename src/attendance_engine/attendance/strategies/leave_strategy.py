from __future__ import annotations

from ...core.enums import DayOption, DayStatus
from .base import DayContext, DayStrategy, StatusDecision


class LeaveStrategy(DayStrategy):
    """Approved leave wins over everything else, punches included."""

    def decide(self, day: DayContext) -> StatusDecision:
        if day.leave is not None and day.leave.day_option == DayOption.HALF:
            return StatusDecision(status=DayStatus.ON_LEAVE_HALF)
        return StatusDecision(status=DayStatus.ON_LEAVE_FULL)
