"""Example: using the service layer directly (no Flask).

Controllers stay thin; the rules live in the services.
"""

import importlib
from datetime import date

from attendance_engine.config import get_settings_module
from attendance_engine.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    for record in container.attendance_service.daily_records("u_fo1", date(2024, 6, 3), date(2024, 6, 9)):
        print(record.to_dict())

    print(container.leave_service.balance_for("u_fo2", today=date(2024, 6, 30)).to_dict())


if __name__ == "__main__":
    main()
