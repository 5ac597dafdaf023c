from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import today_local
from ..common.validators import require_min_length, require_non_empty
from ..core.constants import MIN_LEAVE_REASON_LENGTH
from ..core.enums import DayOption, Decision, LeaveStatus, LeaveType, Role
from ..core.exceptions import (
    AuthorizationError,
    ConfigurationError,
    InputValidationError,
    NotFoundError,
    StateConflictError,
)
from ..settings.provider import SettingsProvider
from ..users.model import User
from ..users.repository import UserRepository
from .balance import compute_balance
from .model import ApprovalRecord, LeaveBalance, LeaveRequest
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


class LeaveWorkflowService:
    """Leave request lifecycle.

    pending_manager_approval -> pending_hr_confirmation -> approved, with
    rejected reachable from both pending states. Terminal states are final.
    """

    def __init__(self, requests: LeaveRepository, users: UserRepository, settings: SettingsProvider):
        self._requests = requests
        self._users = users
        self._settings = settings

    def _final_confirmer(self, role: Role) -> User:
        holders = self._users.find_by_role(role)
        if not holders:
            raise ConfigurationError(f"No user holds the final confirmation role ({role.value})")
        return holders[0]

    def _require(self, request_id: str) -> LeaveRequest:
        req = self._requests.get(request_id)
        if not req:
            raise NotFoundError(f"Leave request {request_id} not found")
        return req

    @staticmethod
    def _validate(
        *,
        leave_type: LeaveType,
        start_date: date,
        end_date: date,
        reason: str,
        day_option: Optional[DayOption],
        today: date,
    ) -> tuple[str, Optional[DayOption]]:
        if end_date < start_date:
            raise InputValidationError("End date cannot be before start date")
        if start_date < today:
            raise InputValidationError("Start date cannot be in the past")

        reason = require_non_empty(reason, "Reason")
        reason = require_min_length(reason, "Reason", MIN_LEAVE_REASON_LENGTH)

        single_day_earned = leave_type == LeaveType.EARNED and start_date == end_date
        if single_day_earned and day_option is None:
            raise InputValidationError("Please select full or half day for single-day earned leaves")
        # Half days exist only for single-day earned leave.
        return reason, (day_option if single_day_earned else None)

    def submit(
        self,
        *,
        user_id: str,
        leave_type: LeaveType,
        start_date: date,
        end_date: date,
        reason: str,
        day_option: Optional[DayOption] = None,
        today: Optional[date] = None,
    ) -> LeaveRequest:
        leave_type = LeaveType(leave_type)
        day_option = DayOption(day_option) if day_option else None
        reason, day_option = self._validate(
            leave_type=leave_type,
            start_date=start_date,
            end_date=end_date,
            reason=reason,
            day_option=day_option,
            today=today or today_local(),
        )

        user = self._users.get_by_id(user_id)
        if not user:
            raise InputValidationError(f"User {user_id} not found")

        if user.reporting_manager_id:
            status = LeaveStatus.PENDING_MANAGER_APPROVAL
            approver_id = user.reporting_manager_id
        else:
            status = LeaveStatus.PENDING_HR_CONFIRMATION
            approver_id = self._final_confirmer(self._settings.snapshot().final_confirmation_role).user_id

        request = LeaveRequest(
            request_id=f"leave_{uuid.uuid4().hex[:12]}",
            user_id=user.user_id,
            user_name=user.name,
            leave_type=leave_type,
            start_date=start_date,
            end_date=end_date,
            reason=reason,
            status=status,
            current_approver_id=approver_id,
            day_option=day_option,
        )
        self._requests.create(request)
        logger.info("Leave %s submitted by %s, waiting on %s (%s)", request.request_id, user.user_id, approver_id, status.value)
        return request

    def approve(self, request_id: str, actor_id: str, comments: Optional[str] = None, *, now: Optional[datetime] = None) -> LeaveRequest:
        return self._decide(request_id, actor_id, Decision.APPROVED, comments, now)

    def reject(self, request_id: str, actor_id: str, comments: Optional[str] = None, *, now: Optional[datetime] = None) -> LeaveRequest:
        return self._decide(request_id, actor_id, Decision.REJECTED, comments, now)

    def _decide(
        self,
        request_id: str,
        actor_id: str,
        decision: Decision,
        comments: Optional[str],
        now: Optional[datetime],
    ) -> LeaveRequest:
        req = self._require(request_id)
        if req.status.is_terminal:
            raise StateConflictError(f"Leave request {request_id} is already {req.status.value}")

        actor = self._users.get_by_id(actor_id)
        if not actor:
            raise NotFoundError(f"User {actor_id} not found")

        final_role = self._settings.snapshot().final_confirmation_role
        may_act = actor.user_id == req.current_approver_id or (
            req.status == LeaveStatus.PENDING_HR_CONFIRMATION and actor.role == final_role
        )
        if not may_act:
            raise AuthorizationError(f"User {actor_id} is not the approver of leave request {request_id}")

        if decision == Decision.REJECTED:
            status, approver_id = LeaveStatus.REJECTED, None
        elif req.status == LeaveStatus.PENDING_MANAGER_APPROVAL:
            status, approver_id = LeaveStatus.PENDING_HR_CONFIRMATION, self._final_confirmer(final_role).user_id
        else:
            status, approver_id = LeaveStatus.APPROVED, None

        record = ApprovalRecord(
            approver_id=actor.user_id,
            approver_name=actor.name,
            decision=decision,
            timestamp=now or datetime.now(),
            comments=(comments or "").strip() or None,
        )
        updated = replace(
            req,
            status=status,
            current_approver_id=approver_id,
            approval_history=(*req.approval_history, record),
        )
        if not self._requests.replace_if_status(updated, expected=req.status):
            raise StateConflictError(f"Leave request {request_id} was changed by another approver")

        logger.info("Leave %s %s by %s: %s -> %s", request_id, decision.value, actor.user_id, req.status.value, status.value)
        return updated

    def get(self, request_id: str) -> LeaveRequest:
        return self._require(request_id)

    def list_for_user(self, user_id: str) -> Sequence[LeaveRequest]:
        return self._requests.list_requests(user_id=user_id)

    def list_for_approver(self, approver_id: str) -> Sequence[LeaveRequest]:
        """Requests waiting on `approver_id`.

        Holders of the final confirmation role also see every request pending
        HR confirmation.
        """
        approver = self._users.get_by_id(approver_id)
        if not approver:
            raise NotFoundError(f"User {approver_id} not found")

        final_role = self._settings.snapshot().final_confirmation_role
        return [
            r
            for r in self._requests.list_requests()
            if r.current_approver_id == approver_id
            or (r.status == LeaveStatus.PENDING_HR_CONFIRMATION and approver.role == final_role)
        ]

    def balance_for(self, user_id: str, *, today: Optional[date] = None) -> LeaveBalance:
        if not self._users.get_by_id(user_id):
            raise NotFoundError(f"User {user_id} not found")
        return compute_balance(
            user_id,
            self._requests.list_requests(user_id=user_id, status=LeaveStatus.APPROVED),
            self._settings.snapshot(),
            as_of=today or today_local(),
        )
