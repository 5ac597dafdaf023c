import json
from datetime import date, datetime, timezone

from attendance_engine.core.enums import DayOption, Decision, EventType, LeaveStatus, LeaveType, Role
from attendance_engine.database.json_store import load_dataset, parse_dataset

PAYLOAD = {
    "users": [
        {"id": "u1", "name": "Farid", "role": "field_officer", "reportingManagerId": "u2", "organizationId": "o1", "employeeId": "EMP1"},
        {"id": "u2", "name": "Sita", "role": "site_manager"},
    ],
    "organizations": [{"id": "o1", "shortName": "Alpha"}],
    "events": [{"id": "e1", "userId": "u1", "timestamp": "2024-06-04T09:00:00Z", "type": "check-in", "latitude": 1.5}],
    "leaveRequests": [
        {
            "id": "l1",
            "userId": "u1",
            "userName": "Farid",
            "leaveType": "Earned",
            "startDate": "2024-06-10",
            "endDate": "2024-06-10",
            "reason": "Family function in town",
            "status": "pending_hr_confirmation",
            "currentApproverId": "hr",
            "dayOption": "half",
            "approvalHistory": [
                {"approverId": "u2", "approverName": "Sita", "status": "approved", "timestamp": "2024-06-05T10:00:00"}
            ],
        }
    ],
    "holidays": [{"id": "h1", "date": "2024-08-15", "name": "Independence Day"}],
}


def test_parse_dataset_maps_camel_case_records():
    data = parse_dataset(PAYLOAD)

    assert data.users[0].role == Role.FIELD_OFFICER
    assert data.users[0].ref_no == "EMP1"
    assert data.users[1].reporting_manager_id is None
    assert data.organizations[0].short_name == "Alpha"
    assert data.events[0].type == EventType.CHECK_IN
    assert data.events[0].timestamp.tzinfo is None
    assert data.events[0].timestamp == datetime(2024, 6, 4, 9, 0, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)
    assert data.events[0].latitude == 1.5

    leave = data.leave_requests[0]
    assert leave.leave_type == LeaveType.EARNED
    assert leave.status == LeaveStatus.PENDING_HR_CONFIRMATION
    assert leave.day_option == DayOption.HALF
    assert leave.approval_history[0].decision == Decision.APPROVED
    assert leave.approval_history[0].timestamp == datetime(2024, 6, 5, 10, 0)
    assert data.holidays[0].date == date(2024, 8, 15)


def test_load_dataset_reads_file(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(PAYLOAD), encoding="utf-8")

    assert len(load_dataset(str(path)).users) == 2


def test_missing_or_empty_path_gives_empty_dataset(tmp_path):
    assert load_dataset("").users == []
    assert load_dataset(str(tmp_path / "nope.json")).events == []
