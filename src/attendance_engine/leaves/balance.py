from __future__ import annotations

from datetime import date
from typing import Iterable

from ..common.datetime_utils import each_day, month_bounds
from ..core.constants import HALF_DAY_WEIGHT, SUNDAY
from ..core.enums import DayOption, LeaveType
from ..settings.model import ConfigSnapshot
from .model import LeaveBalance, LeaveRequest


def leave_days(leave: LeaveRequest, *, start: date, end: date, holiday_dates: frozenset[date]) -> float:
    """Working days of `leave` inside [start, end]; Sundays and holidays are free."""
    weight = HALF_DAY_WEIGHT if leave.day_option == DayOption.HALF else 1.0
    first = max(leave.start_date, start)
    last = min(leave.end_date, end)
    return sum(
        weight
        for day in each_day(first, last)
        if day.weekday() != SUNDAY and day not in holiday_dates
    )


def compute_balance(user_id: str, leaves: Iterable[LeaveRequest], snapshot: ConfigSnapshot, *, as_of: date) -> LeaveBalance:
    """Entitlements from settings minus approved leave taken.

    Earned and sick leave are counted over the calendar year of `as_of`,
    floating leave over its calendar month.
    """
    settings = snapshot.settings
    holiday_dates = snapshot.holiday_dates()
    year_start, year_end = date(as_of.year, 1, 1), date(as_of.year, 12, 31)
    month_start, month_end = month_bounds(as_of)

    used = {LeaveType.EARNED: 0.0, LeaveType.SICK: 0.0, LeaveType.FLOATING: 0.0}
    for leave in leaves:
        if leave.user_id != user_id or not leave.is_approved:
            continue
        if leave.leave_type == LeaveType.FLOATING:
            used[leave.leave_type] += leave_days(leave, start=month_start, end=month_end, holiday_dates=holiday_dates)
        else:
            used[leave.leave_type] += leave_days(leave, start=year_start, end=year_end, holiday_dates=holiday_dates)

    return LeaveBalance(
        user_id=user_id,
        earned_total=settings.annual_earned_leaves,
        earned_used=used[LeaveType.EARNED],
        sick_total=settings.annual_sick_leaves,
        sick_used=used[LeaveType.SICK],
        floating_total=settings.monthly_floating_leaves,
        floating_used=used[LeaveType.FLOATING],
    )
