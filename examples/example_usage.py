"""Example: use the service layer directly (no Flask).

Controllers stay thin; the payroll rules live in the services.
"""

import importlib

from config import get_settings_module

from src.timesheet_pay.timesheet_pay.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=vars(settings))

    session = container.sessions.get("example")
    session.set_basic_pay("30000")
    session.select_month("Jan")
    session.edit_field(session.rows()[0]["date_key"], "timeIn", "10:00 AM")

    for row in session.rows()[:5]:
        print(row["date"], row["status"], row["time_in"], row["time_out"], row["minutes_late_label"], row["working_hours"])
    print(session.summary_ui())


if __name__ == "__main__":
    main()
