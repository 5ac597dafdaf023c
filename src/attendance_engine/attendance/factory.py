from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import SUNDAY
from .strategies.base import DayContext, DayStrategy
from .strategies.holiday_strategy import HolidayStrategy
from .strategies.leave_strategy import LeaveStrategy
from .strategies.punch_strategy import PunchStrategy
from .strategies.weekend_strategy import WeekendStrategy


@dataclass
class DayStrategyFactory:
    """Factory Pattern: pick the strategy of the highest-precedence rule.

    Order: approved leave, holiday, Sunday, then punches.
    """

    def for_day(self, day: DayContext) -> DayStrategy:
        if day.leave is not None:
            return LeaveStrategy()
        if day.is_holiday:
            return HolidayStrategy()
        if day.work_date.weekday() == SUNDAY:
            return WeekendStrategy()
        return PunchStrategy()
