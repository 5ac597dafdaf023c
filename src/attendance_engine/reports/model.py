from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date


@dataclass(frozen=True)
class DashboardSnapshot:
    total_employees: int
    present: int
    absent: int
    on_leave: int


@dataclass(frozen=True)
class TrendPoint:
    work_date: date
    present: int
    absent: int


@dataclass(frozen=True)
class ProductivityPoint:
    work_date: date
    hours: float


@dataclass(frozen=True)
class SiteRate:
    organization_id: str
    name: str
    rate: float


@dataclass(frozen=True)
class DashboardData:
    snapshot: DashboardSnapshot
    attendance_trend: list[TrendPoint]
    productivity_trend: list[ProductivityPoint]
    attendance_by_site: list[SiteRate]
    gap_count: int = 0

    def to_dict(self) -> dict:
        return {
            "totalEmployees": self.snapshot.total_employees,
            "presentToday": self.snapshot.present,
            "absentToday": self.snapshot.absent,
            "onLeaveToday": self.snapshot.on_leave,
            "attendanceTrend": [
                {"date": p.work_date.strftime("%Y-%m-%d"), "present": p.present, "absent": p.absent}
                for p in self.attendance_trend
            ],
            "productivityTrend": [
                {"date": p.work_date.strftime("%Y-%m-%d"), "hours": round(p.hours, 2)} for p in self.productivity_trend
            ],
            "attendanceBySite": [
                {"id": s.organization_id, "name": s.name, "rate": round(s.rate, 2)} for s in self.attendance_by_site
            ],
            "dataGaps": self.gap_count,
        }


@dataclass(frozen=True)
class MusterCounts:
    present: int = 0
    week_off: int = 0
    leaves: int = 0
    absent: int = 0
    half_day: int = 0
    holidays: int = 0


@dataclass(frozen=True)
class MonthlyReportRow:
    """One employee's muster-roll line for a calendar month."""

    sl_no: int
    ref_no: str
    staff_name: str
    day_grid: dict[int, str] = field(default_factory=dict)
    present: int = 0
    week_off: int = 0
    leaves: int = 0
    absent: int = 0
    half_day: int = 0
    holidays: int = 0
    total_payable: float = 0.0


@dataclass(frozen=True)
class CustomLogRow:
    work_date: date
    day: str
    employee_id: str
    employee_name: str
    check_in: Optional[str]
    check_out: Optional[str]
    duration: Optional[str]
    status: str
