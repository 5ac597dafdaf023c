from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Iterator

from dateutil.relativedelta import relativedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_month(value: str) -> date:
    """Parse YYYY-MM string into the first day of that month."""
    return datetime.strptime(value, "%Y-%m").date()


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()


def each_day(start: date, end: date) -> Iterator[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def month_bounds(value: date) -> tuple[date, date]:
    first = value.replace(day=1)
    last = value.replace(day=calendar.monthrange(value.year, value.month)[1])
    return first, last


def months_back(value: date, months: int) -> date:
    """Same day `months` calendar months earlier, clamped to the month's end."""
    return value - relativedelta(months=months)


def to_local_naive(value: datetime) -> datetime:
    """Wall-clock time in the local zone; naive values are taken as local already."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def hours_between(start: datetime, end: datetime) -> float:
    return (end - start).total_seconds() / 3600
