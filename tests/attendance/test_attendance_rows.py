from datetime import date

from src.timesheet_pay.timesheet_pay.attendance.model import AttendanceRecord
from src.timesheet_pay.timesheet_pay.attendance.service import AttendanceService
from src.timesheet_pay.timesheet_pay.attendance.store import InMemoryAttendanceStore

MONDAY = date(2026, 1, 5)
SATURDAY = date(2026, 1, 3)


def test_record_without_status_uses_the_date_default_for_status_and_metrics():
    store = InMemoryAttendanceStore(
        {
            "2026-01-05": AttendanceRecord(time_in="10:00 AM", status=None),
            "2026-01-03": AttendanceRecord(time_in="10:00 AM", status=None),
        }
    )

    monday, saturday = AttendanceService().rows(store, [MONDAY, SATURDAY])

    assert monday["status"] == "working"
    assert monday["minutes_late"] == 30
    assert monday["working_hours"] == "8.50"
    assert saturday["status"] == "off"
    assert saturday["working_hours"] == "0.00"


def test_missing_record_shows_defaults_with_zero_metrics():
    (row,) = AttendanceService().rows(InMemoryAttendanceStore(), [MONDAY])

    assert row["status"] == "working"
    assert row["time_in"] == "9:30 AM"
    assert row["working_hours"] == "0.00"
    assert row["minutes_late_label"] == "-"
