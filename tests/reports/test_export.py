import io
from datetime import date

import pandas as pd

from attendance_engine.reports.export import custom_log_csv, custom_log_table, muster_csv, muster_excel, muster_headers
from attendance_engine.reports.model import CustomLogRow, MonthlyReportRow


def _row():
    return MonthlyReportRow(
        sl_no=1,
        ref_no="EMP021",
        staff_name="Farid",
        day_grid={1: "P", 2: "HD", 3: "WO"},
        present=1,
        week_off=1,
        leaves=0,
        absent=0,
        half_day=1,
        holidays=0,
        total_payable=2.5,
    )


def test_muster_headers_follow_month_length():
    headers = muster_headers(date(2024, 2, 1))

    assert headers[:3] == ["SL.No", "Ref No", "Staff Name"]
    assert headers[3:32] == [str(d) for d in range(1, 30)]
    assert headers[32:] == ["Present", "Half Day", "Absent", "Leaves", "Week Off", "Holidays", "Total Payable Days"]


def test_muster_csv():
    lines = muster_csv([_row()], date(2024, 2, 1)).splitlines()

    assert lines[0].startswith("SL.No,Ref No,Staff Name,1,2,3,")
    assert lines[1].startswith("1,EMP021,Farid,P,HD,WO,")
    assert lines[1].endswith(",1,1,0,0,1,0,2.5")


def test_custom_log_csv_headers_and_blank_cells():
    row = CustomLogRow(
        work_date=date(2024, 6, 4),
        day="Tuesday",
        employee_id="u_fo1",
        employee_name="Farid",
        check_in="09:00",
        check_out=None,
        duration=None,
        status="Incomplete",
    )

    lines = custom_log_csv([row]).splitlines()

    assert lines == [
        "Date,Day,Employee ID,Employee Name,Check-In,Check-Out,Duration,Status",
        "2024-06-04,Tuesday,u_fo1,Farid,09:00,,,Incomplete",
    ]
    assert custom_log_table([row], date(2024, 6, 4), date(2024, 6, 4)).title == "Attendance Log 2024-06-04 to 2024-06-04"


def test_muster_excel_round_trips_through_pandas():
    payload = muster_excel([_row()], date(2024, 2, 1))

    df = pd.read_excel(io.BytesIO(payload), dtype=str)

    assert list(df.columns) == muster_headers(date(2024, 2, 1))
    assert df.loc[0, "Staff Name"] == "Farid"
    assert df.loc[0, "Total Payable Days"] == "2.5"
