from __future__ import annotations

import logging
from datetime import date, time, timedelta

import pytest

from attendance_engine.common.datetime_utils import each_day
from attendance_engine.core.enums import ReportPeriod
from attendance_engine.core.exceptions import InputValidationError
from attendance_engine.settings.model import Holiday

JULY_HOLIDAYS = [Holiday(f"h{d}", date(2024, 7, d), "Festival") for d in (15, 16, 17)]


def _full_day(punch, user_id, day, *, end=time(18, 0)):
    return [punch(user_id, day, time(9, 0), "check-in"), punch(user_id, day, end, "check-out")]


@pytest.fixture
def july_container(make_container, punch):
    # u_fo1 attends every workday of July 2024 except the 30th and 31st
    events = []
    for day in each_day(date(2024, 7, 1), date(2024, 7, 29)):
        if day.weekday() != 6 and day.day not in (15, 16, 17):
            events += _full_day(punch, "u_fo1", day)
    return make_container(events=events, holidays=JULY_HOLIDAYS)


def test_monthly_muster_totals(july_container):
    rows = july_container.report_service.monthly_muster(date(2024, 7, 1), user_ids=["u_fo1"], today=date(2024, 8, 1))

    assert len(rows) == 1
    row = rows[0]
    assert (row.present, row.week_off, row.holidays, row.absent, row.half_day, row.leaves) == (22, 4, 3, 2, 0, 0)
    assert row.total_payable == 29
    assert row.ref_no == "EMP021"
    assert row.staff_name == "Farid"
    assert row.day_grid[1] == "P"
    assert row.day_grid[7] == "WO"
    assert row.day_grid[15] == "H"
    assert row.day_grid[31] == "A"
    assert len(row.day_grid) == 31


def test_muster_covers_all_users_in_id_order(july_container):
    rows = july_container.report_service.monthly_muster(date(2024, 7, 1), today=date(2024, 8, 1))

    assert [r.sl_no for r in rows] == list(range(1, 7))
    assert [r.staff_name for r in rows] == ["Admin", "Farid", "Gita", "Hema", "Omar", "Sita"]


def test_muster_marks_incomplete_and_leave(make_container, punch, approved_leave):
    container = make_container(
        events=[punch("u_fo2", date(2024, 6, 4), time(9, 0), "check-in")],
        leave_requests=[approved_leave("u_fo2", date(2024, 6, 10), date(2024, 6, 12))],
    )

    row = container.report_service.monthly_muster(date(2024, 6, 1), user_ids=["u_fo2"], today=date(2024, 7, 1))[0]

    assert row.day_grid[4] == "-"
    assert [row.day_grid[d] for d in (10, 11, 12)] == ["L", "L", "L"]
    assert row.leaves == 3


def test_muster_rejects_current_month_and_logs(july_container, caplog):
    caplog.set_level(logging.INFO, logger="attendance_engine.reports.service")
    with pytest.raises(InputValidationError, match="End date cannot be in the future."):
        july_container.report_service.monthly_muster(date(2024, 7, 1), today=date(2024, 7, 20))
    assert "rejected" in caplog.text


def test_empty_user_selection_is_rejected(july_container):
    with pytest.raises(InputValidationError, match="No users selected for report."):
        july_container.report_service.monthly_muster(date(2024, 7, 1), user_ids=[], today=date(2024, 8, 1))


def test_custom_log_rows_sorted_by_date_then_employee(make_container, punch):
    day = date(2024, 6, 4)
    container = make_container(events=_full_day(punch, "u_fo2", day, end=time(18, 30)) + _full_day(punch, "u_fo1", day))

    rows = container.report_service.custom_log(
        ReportPeriod.WEEKLY,
        picked=day,
        user_ids=["u_fo2", "u_fo1"],
        today=date(2024, 6, 30),
    )

    assert len(rows) == 14
    assert [(r.work_date, r.employee_id) for r in rows] == sorted((r.work_date, r.employee_id) for r in rows)
    tuesday = [r for r in rows if r.work_date == day]
    assert [(r.employee_id, r.duration, r.status) for r in tuesday] == [
        ("u_fo1", "9.00", "Present"),
        ("u_fo2", "9.50", "Present"),
    ]
    assert tuesday[1].day == "Tuesday"
    assert tuesday[1].check_in == "09:00"


def test_custom_log_validates_range(make_container):
    with pytest.raises(InputValidationError):
        make_container().report_service.custom_log(
            ReportPeriod.CUSTOM,
            start=date(2024, 6, 5),
            end=date(2024, 6, 1),
            today=date(2024, 6, 30),
        )


def test_dashboard_snapshot_counts(make_container, punch, approved_leave):
    day = date(2024, 6, 4)
    container = make_container(
        events=_full_day(punch, "u_fo1", day) + [punch("u_fo2", day, time(9, 0), "check-in")],
        leave_requests=[approved_leave("u_site", day, day)],
    )

    snap = container.report_service.dashboard_snapshot(today=day)

    # u_fo2 is Incomplete: neither present nor absent
    assert (snap.total_employees, snap.present, snap.on_leave, snap.absent) == (6, 1, 1, 3)


def test_trends_cover_trailing_window(make_container, punch):
    today = date(2024, 6, 7)
    container = make_container(
        events=_full_day(punch, "u_fo1", today) + _full_day(punch, "u_fo2", today, end=time(13, 0)),
    )

    trend = container.report_service.attendance_trend(today=today)
    productivity = container.report_service.productivity_trend(today=today)

    assert [p.work_date for p in trend] == [today - timedelta(days=n) for n in range(6, -1, -1)]
    assert trend[-1].present == 2
    assert productivity[-1].hours == pytest.approx(6.5)
    assert productivity[0].hours == 0


def test_site_rates_skip_sundays_and_zero_sites(make_container, punch):
    today = date(2024, 6, 8)
    events = []
    for day in each_day(date(2024, 5, 8), today):
        if day.weekday() != 6:
            events += _full_day(punch, "u_fo1", day)
            events += _full_day(punch, "u_site", day, end=time(14, 0))

    rates = make_container(events=events).report_service.site_attendance_rates(today=today)

    # org_a: u_fo1 always present, u_site always half day; org_b never attends
    assert [r.organization_id for r in rates] == ["org_a"]
    assert rates[0].name == "Alpha Site"
    assert rates[0].rate == pytest.approx(75.0)


def test_dashboard_bundles_everything(make_container, punch):
    today = date(2024, 6, 7)
    container = make_container(events=_full_day(punch, "u_fo1", today) + [punch("u_fo2", today, time(8, 0), "check-out")])

    data = container.report_service.dashboard(today=today).to_dict()

    assert data["totalEmployees"] == 6
    assert data["presentToday"] == 1
    assert len(data["attendanceTrend"]) == 7
    assert data["attendanceBySite"][0]["id"] == "org_a"
    assert data["dataGaps"] == 1
