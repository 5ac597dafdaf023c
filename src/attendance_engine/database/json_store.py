"""JSON fixture loader.

Reads the same shape the web client's mock database uses (camelCase keys) and
fills the in-memory repositories. Storage technology is not the engine's
concern; this is only a convenient source of plain records.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..attendance.model import AttendanceEvent
from ..common.datetime_utils import parse_iso_date, to_local_naive
from ..core.enums import DayOption, Decision, EventType, LeaveStatus, LeaveType, Role
from ..leaves.model import ApprovalRecord, LeaveRequest
from ..settings.model import Holiday
from ..users.model import Organization, User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DataSet:
    users: list[User] = field(default_factory=list)
    organizations: list[Organization] = field(default_factory=list)
    events: list[AttendanceEvent] = field(default_factory=list)
    leave_requests: list[LeaveRequest] = field(default_factory=list)
    holidays: list[Holiday] = field(default_factory=list)


def _parse_timestamp(value: str) -> datetime:
    # "Z" suffix is what browsers emit for toISOString()
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return to_local_naive(parsed)


def _user(raw: dict) -> User:
    return User(
        user_id=str(raw["id"]),
        name=str(raw["name"]),
        role=Role(raw["role"]),
        reporting_manager_id=raw.get("reportingManagerId") or None,
        organization_id=raw.get("organizationId") or None,
        ref_no=raw.get("employeeId") or None,
    )


def _event(raw: dict) -> AttendanceEvent:
    return AttendanceEvent(
        event_id=str(raw["id"]),
        user_id=str(raw["userId"]),
        timestamp=_parse_timestamp(raw["timestamp"]),
        type=EventType(raw["type"]),
        latitude=raw.get("latitude"),
        longitude=raw.get("longitude"),
    )


def _approval(raw: dict) -> ApprovalRecord:
    return ApprovalRecord(
        approver_id=str(raw["approverId"]),
        approver_name=str(raw.get("approverName", "")),
        decision=Decision(raw["status"]),
        timestamp=_parse_timestamp(raw["timestamp"]),
        comments=raw.get("comments"),
    )


def _leave(raw: dict) -> LeaveRequest:
    day_option: Optional[str] = raw.get("dayOption")
    return LeaveRequest(
        request_id=str(raw["id"]),
        user_id=str(raw["userId"]),
        user_name=str(raw.get("userName", "")),
        leave_type=LeaveType(raw["leaveType"]),
        start_date=parse_iso_date(raw["startDate"]),
        end_date=parse_iso_date(raw["endDate"]),
        reason=str(raw.get("reason", "")),
        status=LeaveStatus(raw["status"]),
        current_approver_id=raw.get("currentApproverId"),
        approval_history=tuple(_approval(a) for a in raw.get("approvalHistory", [])),
        day_option=DayOption(day_option) if day_option else None,
    )


def parse_dataset(payload: dict) -> DataSet:
    return DataSet(
        users=[_user(u) for u in payload.get("users", [])],
        organizations=[
            Organization(organization_id=str(o["id"]), short_name=str(o.get("shortName") or o["id"]))
            for o in payload.get("organizations", [])
        ],
        events=[_event(e) for e in payload.get("events", [])],
        leave_requests=[_leave(r) for r in payload.get("leaveRequests", [])],
        holidays=[
            Holiday(holiday_id=str(h["id"]), date=parse_iso_date(h["date"]), name=str(h["name"]))
            for h in payload.get("holidays", [])
        ],
    )


def load_dataset(path: Optional[str]) -> DataSet:
    if not path:
        return DataSet()

    file_path = Path(path)
    if not file_path.is_file():
        logger.warning("Data file %s not found, starting with an empty data set", file_path)
        return DataSet()

    with file_path.open(encoding="utf-8") as fh:
        data = parse_dataset(json.load(fh))
    logger.info(
        "Loaded %s: %d users, %d events, %d leave requests, %d holidays",
        file_path,
        len(data.users),
        len(data.events),
        len(data.leave_requests),
        len(data.holidays),
    )
    return data
