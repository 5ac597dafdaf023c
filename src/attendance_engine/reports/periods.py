from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from ..common.datetime_utils import month_bounds
from ..core.enums import ReportPeriod
from ..core.exceptions import InputValidationError
from .model import DateRange


def week_containing(value: date) -> DateRange:
    """Monday-start week that contains `value`."""
    start = value - timedelta(days=value.weekday())
    return DateRange(start=start, end=start + timedelta(days=6))


def resolve_period(
    period: ReportPeriod,
    *,
    picked: Optional[date] = None,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> DateRange:
    period = ReportPeriod(period)

    if period == ReportPeriod.CUSTOM:
        if start is None or end is None:
            raise InputValidationError("Custom period needs both start and end dates")
        return DateRange(start=start, end=end)

    if picked is None:
        raise InputValidationError(f"A date is required for a {period.value} period")
    if period == ReportPeriod.DAILY:
        return DateRange(start=picked, end=picked)
    if period == ReportPeriod.WEEKLY:
        return week_containing(picked)

    first, last = month_bounds(picked)
    return DateRange(start=first, end=last)


def validate_range(value: DateRange, *, today: date) -> DateRange:
    if value.end > today:
        raise InputValidationError("End date cannot be in the future.")
    if value.start > value.end:
        raise InputValidationError("Start date cannot be after the end date.")
    return value
