from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ...core.enums import DayStatus
from ...leaves.model import LeaveRequest
from ...settings.model import AttendanceSettings
from ..model import DataGapWarning


@dataclass(frozen=True)
class DayContext:
    """Everything known about one employee-day, already filtered to that day."""

    work_date: date
    check_ins: tuple[datetime, ...]
    check_outs: tuple[datetime, ...]
    leave: Optional[LeaveRequest]
    is_holiday: bool
    settings: AttendanceSettings
    user_id: Optional[str] = None


@dataclass(frozen=True)
class StatusDecision:
    status: DayStatus
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    hours: Optional[float] = None
    gaps: tuple[DataGapWarning, ...] = ()


class DayStrategy(ABC):
    """Strategy Pattern: one precedence rule for deciding a day's status."""

    @abstractmethod
    def decide(self, day: DayContext) -> StatusDecision:
        raise NotImplementedError
