"""Daily status classifier.

Turns one employee-day of punches, approved leave and the holiday calendar
into a single :class:`DailyAttendanceRecord`. Pure: same inputs, same record.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional, Sequence

from ..core.enums import EventType
from ..leaves.model import LeaveRequest
from ..settings.model import AttendanceSettings, Holiday
from .factory import DayStrategyFactory
from .model import AttendanceEvent, DailyAttendanceRecord
from .strategies.base import DayContext

logger = logging.getLogger(__name__)

_DEFAULT_FACTORY = DayStrategyFactory()


def first_approved_leave(leaves: Iterable[LeaveRequest], work_date: date) -> Optional[LeaveRequest]:
    for leave in leaves:
        if leave.is_approved and leave.covers(work_date):
            return leave
    return None


def build_day_context(
    *,
    work_date: date,
    day_events: Iterable[AttendanceEvent],
    leaves: Iterable[LeaveRequest],
    holiday_dates: frozenset[date],
    settings: AttendanceSettings,
    user_id: Optional[str] = None,
) -> DayContext:
    """Assemble a DayContext from events already known to fall on work_date."""
    check_ins = []
    check_outs = []
    for event in day_events:
        if event.type == EventType.CHECK_IN:
            check_ins.append(event.timestamp)
        elif event.type == EventType.CHECK_OUT:
            check_outs.append(event.timestamp)

    return DayContext(
        work_date=work_date,
        check_ins=tuple(sorted(check_ins)),
        check_outs=tuple(sorted(check_outs)),
        leave=first_approved_leave(leaves, work_date),
        is_holiday=work_date in holiday_dates,
        settings=settings,
        user_id=user_id,
    )


def classify_day(day: DayContext, *, factory: Optional[DayStrategyFactory] = None) -> DailyAttendanceRecord:
    strategy = (factory or _DEFAULT_FACTORY).for_day(day)
    decision = strategy.decide(day)

    for gap in decision.gaps:
        logger.warning("Data gap for user=%s on %s: %s (%s)", gap.user_id, gap.work_date, gap.kind.value, gap.detail)

    return DailyAttendanceRecord(
        work_date=day.work_date,
        day=day.work_date.strftime("%A"),
        status=decision.status,
        check_in=decision.check_in,
        check_out=decision.check_out,
        hours=decision.hours,
        gaps=decision.gaps,
    )


def classify(
    work_date: date,
    events: Sequence[AttendanceEvent],
    leaves: Sequence[LeaveRequest],
    holidays: Iterable[Holiday],
    settings: AttendanceSettings,
    *,
    user_id: Optional[str] = None,
    factory: Optional[DayStrategyFactory] = None,
) -> DailyAttendanceRecord:
    """Classify one employee-day.

    `events` and `leaves` belong to a single employee; events on other days are
    ignored, as are leaves that are not approved.
    """
    day = build_day_context(
        work_date=work_date,
        day_events=[e for e in events if e.timestamp.date() == work_date],
        leaves=leaves,
        holiday_dates=frozenset(h.date for h in holidays),
        settings=settings,
        user_id=user_id,
    )
    return classify_day(day, factory=factory)
