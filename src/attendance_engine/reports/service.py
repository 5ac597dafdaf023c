from __future__ import annotations

import logging
from collections import Counter
from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from ..attendance.model import DailyAttendanceRecord
from ..attendance.reconciler import BatchReconciler, BatchResult
from ..attendance.repository import EventRepository
from ..common.datetime_utils import each_day, month_bounds, months_back, today_local
from ..core.constants import DEFAULT_SITE_RATE_MONTHS, DEFAULT_TREND_DAYS, HALF_DAY_WEIGHT, SUNDAY
from ..core.enums import DayStatus, LeaveStatus, ReportPeriod
from ..core.exceptions import InputValidationError
from ..leaves.repository import LeaveRepository
from ..settings.model import ConfigSnapshot
from ..settings.provider import SettingsProvider
from ..users.model import Organization, User
from ..users.repository import OrganizationRepository, UserRepository
from .calculator.base import PayableDaysCalculator
from .calculator.standard_calculator import StandardPayableCalculator
from .model import (
    CustomLogRow,
    DashboardData,
    DashboardSnapshot,
    DateRange,
    MonthlyReportRow,
    MusterCounts,
    ProductivityPoint,
    SiteRate,
    TrendPoint,
)
from .periods import resolve_period, validate_range

logger = logging.getLogger(__name__)

MUSTER_CODES = {
    DayStatus.PRESENT: "P",
    DayStatus.ABSENT: "A",
    DayStatus.HALF_DAY: "HD",
    DayStatus.ON_LEAVE_FULL: "L",
    DayStatus.ON_LEAVE_HALF: "L",
    DayStatus.WEEKEND: "WO",
    DayStatus.HOLIDAY: "H",
}


def day_records(batch: BatchResult, day: date) -> list[DailyAttendanceRecord]:
    return [batch.record_for(user_id, day) for user_id in batch.records]


def snapshot_for(batch: BatchResult, day: date) -> DashboardSnapshot:
    present = absent = on_leave = 0
    for rec in day_records(batch, day):
        if rec.status.is_leave:
            on_leave += 1
        elif rec.status.is_attended:
            present += 1
        elif rec.status == DayStatus.ABSENT:
            absent += 1
    return DashboardSnapshot(total_employees=len(batch.records), present=present, absent=absent, on_leave=on_leave)


def trend_for(batch: BatchResult, days: Iterable[date]) -> list[TrendPoint]:
    points = []
    for day in days:
        s = snapshot_for(batch, day)
        points.append(TrendPoint(work_date=day, present=s.present, absent=s.absent))
    return points


def productivity_for(batch: BatchResult, days: Iterable[date]) -> list[ProductivityPoint]:
    points = []
    for day in days:
        hours = [rec.hours or 0.0 for rec in day_records(batch, day) if rec.status.is_attended]
        points.append(ProductivityPoint(work_date=day, hours=sum(hours) / len(hours) if hours else 0.0))
    return points


def site_rates_for(
    batch: BatchResult,
    users: Sequence[User],
    organizations: Iterable[Organization],
    snapshot: ConfigSnapshot,
) -> list[SiteRate]:
    """Share of workdays attended per site, best first.

    Workdays exclude Sundays and holidays. Sites at 0% are left out.
    """
    holiday_dates = snapshot.holiday_dates()
    names = {org.organization_id: org.short_name for org in organizations}
    present_days: dict[str, float] = {org_id: 0.0 for org_id in names}
    work_days: dict[str, int] = {org_id: 0 for org_id in names}

    assigned = [u for u in users if u.organization_id in names and u.user_id in batch.records]
    for day in each_day(batch.start, batch.end):
        if day.weekday() == SUNDAY or day in holiday_dates:
            continue
        for user in assigned:
            work_days[user.organization_id] += 1
            status = batch.record_for(user.user_id, day).status
            if status == DayStatus.PRESENT:
                present_days[user.organization_id] += 1
            elif status == DayStatus.HALF_DAY:
                present_days[user.organization_id] += HALF_DAY_WEIGHT

    rates = [
        SiteRate(
            organization_id=org_id,
            name=name,
            rate=(present_days[org_id] / work_days[org_id]) * 100 if work_days[org_id] > 0 else 0.0,
        )
        for org_id, name in names.items()
    ]
    rates = [r for r in rates if r.rate > 0]
    rates.sort(key=lambda r: r.rate, reverse=True)
    return rates


def muster_row(
    sl_no: int,
    user: User,
    records: Sequence[DailyAttendanceRecord],
    calculator: PayableDaysCalculator,
) -> MonthlyReportRow:
    statuses = Counter(rec.status for rec in records)
    counts = MusterCounts(
        present=statuses[DayStatus.PRESENT],
        week_off=statuses[DayStatus.WEEKEND],
        leaves=statuses[DayStatus.ON_LEAVE_FULL] + statuses[DayStatus.ON_LEAVE_HALF],
        absent=statuses[DayStatus.ABSENT],
        half_day=statuses[DayStatus.HALF_DAY],
        holidays=statuses[DayStatus.HOLIDAY],
    )
    return MonthlyReportRow(
        sl_no=sl_no,
        ref_no=user.ref_no or user.user_id,
        staff_name=user.name,
        day_grid={rec.work_date.day: MUSTER_CODES.get(rec.status, "-") for rec in records},
        present=counts.present,
        week_off=counts.week_off,
        leaves=counts.leaves,
        absent=counts.absent,
        half_day=counts.half_day,
        holidays=counts.holidays,
        total_payable=calculator.total_payable(counts),
    )


class AttendanceReportService:
    """Dashboard statistics and report rows, all derived from reconciled days."""

    def __init__(
        self,
        users: UserRepository,
        organizations: OrganizationRepository,
        events: EventRepository,
        leaves: LeaveRepository,
        settings: SettingsProvider,
        *,
        reconciler: Optional[BatchReconciler] = None,
        calculator: Optional[PayableDaysCalculator] = None,
    ):
        self._users = users
        self._organizations = organizations
        self._events = events
        self._leaves = leaves
        self._settings = settings
        self._reconciler = reconciler or BatchReconciler()
        self._calculator = calculator or StandardPayableCalculator()

    def _batch(self, users: Sequence[User], start: date, end: date) -> tuple[BatchResult, ConfigSnapshot]:
        snapshot = self._settings.snapshot()
        batch = self._reconciler.run(
            [u.user_id for u in users],
            start,
            end,
            self._events.list_between(start_date=start, end_date=end),
            self._leaves.list_requests(status=LeaveStatus.APPROVED),
            snapshot,
        )
        return batch, snapshot

    def _select_users(self, user_ids: Optional[Iterable[str]]) -> list[User]:
        users = list(self._users.list_all())
        if user_ids is not None:
            wanted = set(user_ids)
            users = [u for u in users if u.user_id in wanted]
        if not users:
            raise InputValidationError("No users selected for report.")
        return users

    @staticmethod
    def _trailing(today: date, days: int) -> list[date]:
        if days < 1:
            raise InputValidationError("Trend window must cover at least one day")
        return list(each_day(today - timedelta(days=days - 1), today))

    # Dashboard
    def dashboard_snapshot(self, today: Optional[date] = None) -> DashboardSnapshot:
        today = today or today_local()
        batch, _ = self._batch(self._users.list_all(), today, today)
        return snapshot_for(batch, today)

    def attendance_trend(self, today: Optional[date] = None, *, days: int = DEFAULT_TREND_DAYS) -> list[TrendPoint]:
        today = today or today_local()
        window = self._trailing(today, days)
        batch, _ = self._batch(self._users.list_all(), window[0], today)
        return trend_for(batch, window)

    def productivity_trend(self, today: Optional[date] = None, *, days: int = DEFAULT_TREND_DAYS) -> list[ProductivityPoint]:
        today = today or today_local()
        window = self._trailing(today, days)
        batch, _ = self._batch(self._users.list_all(), window[0], today)
        return productivity_for(batch, window)

    def site_attendance_rates(self, today: Optional[date] = None) -> list[SiteRate]:
        today = today or today_local()
        users = self._users.list_all()
        batch, snapshot = self._batch(users, months_back(today, DEFAULT_SITE_RATE_MONTHS), today)
        return site_rates_for(batch, users, self._organizations.list_all(), snapshot)

    def dashboard(self, today: Optional[date] = None, *, trend_days: int = DEFAULT_TREND_DAYS) -> DashboardData:
        """All dashboard figures from one reconciliation batch."""
        today = today or today_local()
        users = self._users.list_all()
        window = self._trailing(today, trend_days)
        month_start = months_back(today, DEFAULT_SITE_RATE_MONTHS)

        batch, snapshot = self._batch(users, min(window[0], month_start), today)
        site_batch = BatchResult(
            start=month_start,
            end=today,
            records={uid: recs[(month_start - batch.start).days:] for uid, recs in batch.records.items()},
        )
        return DashboardData(
            snapshot=snapshot_for(batch, today),
            attendance_trend=trend_for(batch, window),
            productivity_trend=productivity_for(batch, window),
            attendance_by_site=site_rates_for(site_batch, users, self._organizations.list_all(), snapshot),
            gap_count=batch.gap_count,
        )

    # Reports
    def monthly_muster(
        self,
        month: date,
        *,
        user_ids: Optional[Iterable[str]] = None,
        today: Optional[date] = None,
    ) -> list[MonthlyReportRow]:
        first, last = month_bounds(month)
        try:
            validate_range(DateRange(start=first, end=last), today=today or today_local())
            users = self._select_users(user_ids)
        except InputValidationError as e:
            logger.info("Monthly muster for %s rejected: %s", first.strftime("%Y-%m"), e)
            raise

        batch, _ = self._batch(users, first, last)
        return [
            muster_row(index, user, batch.records[user.user_id], self._calculator)
            for index, user in enumerate(users, start=1)
        ]

    def custom_log(
        self,
        period: ReportPeriod,
        *,
        picked: Optional[date] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
        user_ids: Optional[Iterable[str]] = None,
        today: Optional[date] = None,
    ) -> list[CustomLogRow]:
        try:
            span = validate_range(
                resolve_period(period, picked=picked, start=start, end=end),
                today=today or today_local(),
            )
            users = self._select_users(user_ids)
        except InputValidationError as e:
            logger.info("Custom log (%s) rejected: %s", period, e)
            raise

        batch, _ = self._batch(users, span.start, span.end)
        rows = [
            CustomLogRow(
                work_date=rec.work_date,
                day=rec.day,
                employee_id=user.user_id,
                employee_name=user.name,
                check_in=rec.check_in_label,
                check_out=rec.check_out_label,
                duration=rec.duration,
                status=rec.status.value,
            )
            for user in users
            for rec in batch.records[user.user_id]
        ]
        rows.sort(key=lambda r: (r.work_date, r.employee_id))
        return rows
