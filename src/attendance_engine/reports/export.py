"""Serializers for report rows.

CSV and the tabular model used for PDF output share one layout per report, so
a muster roll reads the same whichever format is downloaded.
"""
from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import date
from typing import Sequence

import pandas as pd

from ..common.datetime_utils import month_bounds
from .model import CustomLogRow, MonthlyReportRow

MUSTER_TOTAL_HEADERS = ["Present", "Half Day", "Absent", "Leaves", "Week Off", "Holidays", "Total Payable Days"]
CUSTOM_LOG_HEADERS = ["Date", "Day", "Employee ID", "Employee Name", "Check-In", "Check-Out", "Duration", "Status"]


@dataclass(frozen=True)
class ReportTable:
    title: str
    headers: list[str]
    rows: list[list[str]]
    landscape: bool = False


def _days_in_month(month: date) -> int:
    return month_bounds(month)[1].day


def muster_headers(month: date) -> list[str]:
    return ["SL.No", "Ref No", "Staff Name", *[str(d) for d in range(1, _days_in_month(month) + 1)], *MUSTER_TOTAL_HEADERS]


def _muster_cells(row: MonthlyReportRow, days: int) -> list[str]:
    return [
        str(row.sl_no),
        row.ref_no,
        row.staff_name,
        *[row.day_grid.get(d, "") for d in range(1, days + 1)],
        str(row.present),
        str(row.half_day),
        str(row.absent),
        str(row.leaves),
        str(row.week_off),
        str(row.holidays),
        f"{row.total_payable:.1f}",
    ]


def _log_cells(row: CustomLogRow) -> list[str]:
    return [
        row.work_date.strftime("%Y-%m-%d"),
        row.day,
        row.employee_id,
        row.employee_name,
        row.check_in or "",
        row.check_out or "",
        row.duration or "",
        row.status,
    ]


def muster_table(rows: Sequence[MonthlyReportRow], month: date) -> ReportTable:
    days = _days_in_month(month)
    return ReportTable(
        title=f"Monthly Report Attendance - {month:%B %Y}",
        headers=muster_headers(month),
        rows=[_muster_cells(r, days) for r in rows],
        landscape=True,
    )


def custom_log_table(rows: Sequence[CustomLogRow], start: date, end: date) -> ReportTable:
    return ReportTable(
        title=f"Attendance Log {start:%Y-%m-%d} to {end:%Y-%m-%d}",
        headers=list(CUSTOM_LOG_HEADERS),
        rows=[_log_cells(r) for r in rows],
    )


def _write_csv(headers: list[str], rows: list[list[str]]) -> str:
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(headers)
    writer.writerows(rows)
    return out.getvalue()


def muster_csv(rows: Sequence[MonthlyReportRow], month: date) -> str:
    table = muster_table(rows, month)
    return _write_csv(table.headers, table.rows)


def custom_log_csv(rows: Sequence[CustomLogRow]) -> str:
    return _write_csv(list(CUSTOM_LOG_HEADERS), [_log_cells(r) for r in rows])


def muster_excel(rows: Sequence[MonthlyReportRow], month: date) -> bytes:
    table = muster_table(rows, month)
    df = pd.DataFrame(table.rows, columns=table.headers)

    # Built in memory, nothing touches the disk
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=f"{month:%b_%Y}")
    return output.getvalue()
