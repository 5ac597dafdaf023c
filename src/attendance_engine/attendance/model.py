from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import DayStatus, EventType, GapKind


@dataclass(frozen=True)
class AttendanceEvent:
    """Raw punch captured by the check-in collaborator. Never mutated."""

    event_id: str
    user_id: str
    timestamp: datetime
    type: EventType
    latitude: Optional[float] = None
    longitude: Optional[float] = None


@dataclass(frozen=True)
class DataGapWarning:
    """Non-fatal irregularity found while classifying a day, kept for audit."""

    work_date: date
    kind: GapKind
    detail: str
    user_id: Optional[str] = None


@dataclass(frozen=True)
class DailyAttendanceRecord:
    """Derived verdict for one employee-day (never the source of truth)."""

    work_date: date
    day: str
    status: DayStatus
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    hours: Optional[float] = None
    gaps: tuple[DataGapWarning, ...] = ()

    @property
    def duration(self) -> Optional[str]:
        return f"{self.hours:.2f}" if self.hours is not None else None

    @property
    def check_in_label(self) -> Optional[str]:
        return self.check_in.strftime("%H:%M") if self.check_in else None

    @property
    def check_out_label(self) -> Optional[str]:
        return self.check_out.strftime("%H:%M") if self.check_out else None

    def to_dict(self) -> dict:
        return {
            "date": self.work_date.strftime("%Y-%m-%d"),
            "day": self.day,
            "checkIn": self.check_in_label,
            "checkOut": self.check_out_label,
            "duration": self.duration,
            "status": self.status.value,
        }
