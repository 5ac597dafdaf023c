from __future__ import annotations

import importlib
from datetime import date, datetime, time

import pytest

from attendance_engine.attendance.model import AttendanceEvent
from attendance_engine.container import build_container
from attendance_engine.core.enums import DayOption, EventType, LeaveStatus, LeaveType, Role
from attendance_engine.database.json_store import DataSet
from attendance_engine.leaves.model import LeaveRequest
from attendance_engine.settings.model import AttendanceSettings, Holiday
from attendance_engine.users.model import Organization, User


@pytest.fixture
def settings() -> AttendanceSettings:
    return AttendanceSettings()


@pytest.fixture
def punch():
    """Build a check-in/check-out event: punch("u1", date, time(9, 0), "check-in")."""
    counter = {"n": 0}

    def _punch(user_id: str, day: date, at: time, kind: str) -> AttendanceEvent:
        counter["n"] += 1
        return AttendanceEvent(
            event_id=f"evt_{counter['n']}",
            user_id=user_id,
            timestamp=datetime.combine(day, at),
            type=EventType(kind),
        )

    return _punch


@pytest.fixture
def approved_leave():
    def _leave(user_id: str, start: date, end: date, *, leave_type=LeaveType.SICK, day_option=None, request_id=None):
        return LeaveRequest(
            request_id=request_id or f"leave_{user_id}_{start:%Y%m%d}",
            user_id=user_id,
            user_name=user_id,
            leave_type=leave_type,
            start_date=start,
            end_date=end,
            reason="Approved for testing",
            status=LeaveStatus.APPROVED,
            current_approver_id=None,
            day_option=DayOption(day_option) if day_option else None,
        )

    return _leave


@pytest.fixture
def staff() -> list[User]:
    return [
        User(user_id="u_admin", name="Admin", role=Role.ADMIN, ref_no="EMP001"),
        User(user_id="u_hr", name="Hema", role=Role.HR, ref_no="EMP002"),
        User(user_id="u_ops", name="Omar", role=Role.OPERATION_MANAGER, ref_no="EMP003"),
        User(user_id="u_site", name="Sita", role=Role.SITE_MANAGER, reporting_manager_id="u_ops", organization_id="org_a", ref_no="EMP010"),
        User(user_id="u_fo1", name="Farid", role=Role.FIELD_OFFICER, reporting_manager_id="u_site", organization_id="org_a", ref_no="EMP021"),
        User(user_id="u_fo2", name="Gita", role=Role.FIELD_OFFICER, reporting_manager_id="u_site", organization_id="org_b", ref_no="EMP022"),
    ]


@pytest.fixture
def organizations() -> list[Organization]:
    return [Organization("org_a", "Alpha Site"), Organization("org_b", "Beta Site")]


@pytest.fixture
def make_container(staff, organizations):
    testing = importlib.import_module("attendance_engine.config.testing")

    def _make(*, events=(), leave_requests=(), holidays: list[Holiday] = ()):
        dataset = DataSet(
            users=list(staff),
            organizations=list(organizations),
            events=list(events),
            leave_requests=list(leave_requests),
            holidays=list(holidays),
        )
        return build_container(settings=testing, dataset=dataset)

    return _make
