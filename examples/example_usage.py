"""Example: use the service layer directly (no Flask).

Fetches the roster and the attendance history, then prints today's counts and
the raw history of one employee.
"""

import importlib
import sys

from config import get_settings_module

from src.hrms_attendance.hrms_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(api_config=settings.API_CONFIG)

    view = container.dashboard_service.refresh()
    print(view.date_label, view.stats.to_dict(), view.pending_message)

    if len(sys.argv) > 1:
        for row in container.attendance_service.get_history_ui(sys.argv[1]):
            print(row)


if __name__ == "__main__":
    main()
