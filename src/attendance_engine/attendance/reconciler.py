from __future__ import annotations

import logging
import os
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import each_day
from ..core.exceptions import InputValidationError
from ..leaves.model import LeaveRequest
from ..settings.model import AttendanceSettings, ConfigSnapshot, Holiday
from .classifier import build_day_context, classify_day
from .factory import DayStrategyFactory
from .model import AttendanceEvent, DailyAttendanceRecord

logger = logging.getLogger(__name__)


def reconcile(
    user_id: str,
    start: date,
    end: date,
    events: Iterable[AttendanceEvent],
    leaves: Iterable[LeaveRequest],
    holidays: Iterable[Holiday],
    settings: AttendanceSettings,
    *,
    factory: Optional[DayStrategyFactory] = None,
) -> list[DailyAttendanceRecord]:
    """One record per calendar day in [start, end], in date order."""
    if start > end:
        raise InputValidationError("Start date cannot be after the end date")

    events_by_day: dict[date, list[AttendanceEvent]] = defaultdict(list)
    for event in events:
        if event.user_id != user_id:
            continue
        day = event.timestamp.date()
        if start <= day <= end:
            events_by_day[day].append(event)

    approved = [
        leave
        for leave in leaves
        if leave.user_id == user_id and leave.is_approved and leave.start_date <= end and leave.end_date >= start
    ]
    holiday_dates = frozenset(h.date for h in holidays)

    return [
        classify_day(
            build_day_context(
                work_date=day,
                day_events=events_by_day.get(day, ()),
                leaves=approved,
                holiday_dates=holiday_dates,
                settings=settings,
                user_id=user_id,
            ),
            factory=factory,
        )
        for day in each_day(start, end)
    ]


@dataclass(frozen=True)
class BatchResult:
    start: date
    end: date
    records: dict[str, list[DailyAttendanceRecord]]
    gap_count: int = 0

    def record_for(self, user_id: str, day: date) -> DailyAttendanceRecord:
        if not self.start <= day <= self.end:
            raise KeyError(day)
        return self.records[user_id][(day - self.start).days]


class BatchReconciler:
    """Runs `reconcile` for many employees on a bounded worker pool.

    Results are keyed and ordered by user id, so callers never observe the
    order in which workers finished.
    """

    def __init__(self, *, max_workers: Optional[int] = None, factory: Optional[DayStrategyFactory] = None):
        self._max_workers = max_workers or os.cpu_count() or 1
        self._factory = factory

    @property
    def max_workers(self) -> int:
        return self._max_workers

    def run(
        self,
        user_ids: Iterable[str],
        start: date,
        end: date,
        events: Sequence[AttendanceEvent],
        leaves: Sequence[LeaveRequest],
        snapshot: ConfigSnapshot,
    ) -> BatchResult:
        if start > end:
            raise InputValidationError("Start date cannot be after the end date")

        ids = sorted(set(user_ids))
        if not ids:
            return BatchResult(start=start, end=end, records={})

        events_by_user: dict[str, list[AttendanceEvent]] = defaultdict(list)
        for event in events:
            events_by_user[event.user_id].append(event)
        leaves_by_user: dict[str, list[LeaveRequest]] = defaultdict(list)
        for leave in leaves:
            leaves_by_user[leave.user_id].append(leave)

        results: dict[str, list[DailyAttendanceRecord]] = {}
        with ThreadPoolExecutor(max_workers=min(self._max_workers, len(ids))) as executor:
            future_to_user = {
                executor.submit(
                    reconcile,
                    user_id,
                    start,
                    end,
                    events_by_user.get(user_id, ()),
                    leaves_by_user.get(user_id, ()),
                    snapshot.holidays,
                    snapshot.settings,
                    factory=self._factory,
                ): user_id
                for user_id in ids
            }
            for future in as_completed(future_to_user):
                results[future_to_user[future]] = future.result()

        ordered = {user_id: results[user_id] for user_id in ids}
        gap_count = sum(len(r.gaps) for records in ordered.values() for r in records)
        if gap_count:
            logger.info("Reconciled %d users %s..%s with %d data gap(s)", len(ids), start, end, gap_count)
        return BatchResult(start=start, end=end, records=ordered, gap_count=gap_count)
