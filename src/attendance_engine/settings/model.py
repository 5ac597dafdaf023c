from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..common.validators import require_non_negative
from ..core.enums import Role
from ..core.exceptions import InputValidationError


@dataclass(frozen=True)
class Holiday:
    holiday_id: str
    date: date
    name: str


@dataclass(frozen=True)
class AttendanceSettings:
    """Process-wide attendance thresholds and leave entitlements."""

    minimum_hours_full_day: float = 8
    minimum_hours_half_day: float = 4
    annual_earned_leaves: int = 5
    annual_sick_leaves: int = 12
    monthly_floating_leaves: int = 1
    enable_attendance_notifications: bool = False

    def validated(self) -> "AttendanceSettings":
        require_non_negative(self.minimum_hours_full_day, "minimum_hours_full_day")
        require_non_negative(self.minimum_hours_half_day, "minimum_hours_half_day")
        if self.minimum_hours_half_day >= self.minimum_hours_full_day:
            raise InputValidationError("minimum_hours_half_day must be below minimum_hours_full_day")
        require_non_negative(self.annual_earned_leaves, "annual_earned_leaves")
        require_non_negative(self.annual_sick_leaves, "annual_sick_leaves")
        require_non_negative(self.monthly_floating_leaves, "monthly_floating_leaves")
        return self


@dataclass(frozen=True)
class ConfigSnapshot:
    """Immutable view of settings and holidays for one reconciliation batch."""

    settings: AttendanceSettings
    holidays: tuple[Holiday, ...]
    final_confirmation_role: Role

    def holiday_dates(self) -> frozenset[date]:
        return frozenset(h.date for h in self.holidays)
