from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles known to the user directory."""

    ADMIN = "admin"
    HR = "hr"
    DEVELOPER = "developer"
    OPERATION_MANAGER = "operation_manager"
    SITE_MANAGER = "site_manager"
    FIELD_OFFICER = "field_officer"


# Roles an administrator may pick as the last step of the leave workflow.
FINAL_CONFIRMATION_ROLES = frozenset({Role.ADMIN, Role.HR, Role.OPERATION_MANAGER})


class EventType(str, Enum):
    CHECK_IN = "check-in"
    CHECK_OUT = "check-out"


class DayStatus(str, Enum):
    """Attendance verdict for one employee-day."""

    PRESENT = "Present"
    HALF_DAY = "Half Day"
    ABSENT = "Absent"
    HOLIDAY = "Holiday"
    WEEKEND = "Weekend"
    INCOMPLETE = "Incomplete"
    ON_LEAVE_FULL = "On Leave (Full)"
    ON_LEAVE_HALF = "On Leave (Half)"

    @property
    def is_leave(self) -> bool:
        return self in {DayStatus.ON_LEAVE_FULL, DayStatus.ON_LEAVE_HALF}

    @property
    def is_attended(self) -> bool:
        return self in {DayStatus.PRESENT, DayStatus.HALF_DAY}


class LeaveType(str, Enum):
    EARNED = "Earned"
    SICK = "Sick"
    FLOATING = "Floating"


class DayOption(str, Enum):
    FULL = "full"
    HALF = "half"


class LeaveStatus(str, Enum):
    """Leave workflow states."""

    PENDING_MANAGER_APPROVAL = "pending_manager_approval"
    PENDING_HR_CONFIRMATION = "pending_hr_confirmation"
    APPROVED = "approved"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        return self in {LeaveStatus.APPROVED, LeaveStatus.REJECTED}


class Decision(str, Enum):
    APPROVED = "approved"
    REJECTED = "rejected"


class GapKind(str, Enum):
    ORPHAN_CHECK_OUT = "orphan_check_out"
    NEGATIVE_SPAN = "negative_span"


class ReportPeriod(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    CUSTOM = "custom"
