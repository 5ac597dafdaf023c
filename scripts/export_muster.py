"""Export a monthly muster roll without going through Flask.

Usage: python scripts/export_muster.py 2024-06 [csv|xlsx]
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

from dotenv import load_dotenv

from attendance_engine.common.datetime_utils import parse_month
from attendance_engine.config import get_settings_module
from attendance_engine.container import build_container
from attendance_engine.reports.export import muster_csv, muster_excel

FORMATS = ("csv", "xlsx")


def main() -> None:
    if len(sys.argv) < 2:
        raise SystemExit(__doc__)

    load_dotenv(override=False)
    month = parse_month(sys.argv[1])
    fmt = (sys.argv[2] if len(sys.argv) > 2 else "csv").lower()
    if fmt not in FORMATS:
        raise SystemExit(f"Unsupported format: {fmt}\n{__doc__}")

    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)
    rows = container.report_service.monthly_muster(month)

    out_dir = Path(__file__).resolve().parents[1] / "exports"
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / f"muster_{month:%Y_%m}.{fmt}"

    if fmt == "xlsx":
        out_file.write_bytes(muster_excel(rows, month))
    else:
        out_file.write_text(muster_csv(rows, month), encoding="utf-8-sig")
    print(f"OK: {len(rows)} rows written to {out_file}")


if __name__ == "__main__":
    main()
