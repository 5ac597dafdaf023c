from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import DayOption, Decision, LeaveStatus, LeaveType


@dataclass(frozen=True)
class ApprovalRecord:
    approver_id: str
    approver_name: str
    decision: Decision
    timestamp: datetime
    comments: Optional[str] = None


@dataclass(frozen=True)
class LeaveRequest:
    request_id: str
    user_id: str
    user_name: str
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: str
    status: LeaveStatus
    current_approver_id: Optional[str]
    approval_history: tuple[ApprovalRecord, ...] = ()
    day_option: Optional[DayOption] = None

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    @property
    def is_approved(self) -> bool:
        return self.status == LeaveStatus.APPROVED

    def to_dict(self) -> dict:
        return {
            "id": self.request_id,
            "userId": self.user_id,
            "userName": self.user_name,
            "leaveType": self.leave_type.value,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "reason": self.reason,
            "status": self.status.value,
            "currentApproverId": self.current_approver_id,
            "dayOption": self.day_option.value if self.day_option else None,
            "approvalHistory": [
                {
                    "approverId": a.approver_id,
                    "approverName": a.approver_name,
                    "status": a.decision.value,
                    "timestamp": a.timestamp.isoformat(),
                    "comments": a.comments,
                }
                for a in self.approval_history
            ],
        }


@dataclass(frozen=True)
class LeaveBalance:
    user_id: str
    earned_total: float
    earned_used: float
    sick_total: float
    sick_used: float
    floating_total: float
    floating_used: float

    @property
    def earned_remaining(self) -> float:
        return self.earned_total - self.earned_used

    @property
    def sick_remaining(self) -> float:
        return self.sick_total - self.sick_used

    @property
    def floating_remaining(self) -> float:
        return self.floating_total - self.floating_used

    def to_dict(self) -> dict:
        return {
            "userId": self.user_id,
            "earned": {"total": self.earned_total, "used": self.earned_used, "remaining": self.earned_remaining},
            "sick": {"total": self.sick_total, "used": self.sick_used, "remaining": self.sick_remaining},
            "floating": {"total": self.floating_total, "used": self.floating_used, "remaining": self.floating_remaining},
        }
