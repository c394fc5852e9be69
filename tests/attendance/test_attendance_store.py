from datetime import date

import pytest

from src.timesheet_pay.timesheet_pay.attendance.model import AttendanceRecord
from src.timesheet_pay.timesheet_pay.attendance.store import InMemoryAttendanceStore, reconcile_records
from src.timesheet_pay.timesheet_pay.calendar.generator import generate_window
from src.timesheet_pay.timesheet_pay.core.enums import DayStatus
from src.timesheet_pay.timesheet_pay.core.exceptions import ValidationError

JAN_2026 = generate_window("Jan", today=date(2026, 1, 15))


def test_reconcile_creates_defaults_with_weekends_off():
    store = InMemoryAttendanceStore()
    store.reconcile(JAN_2026)

    assert len(store) == 31
    friday = store.get("2025-12-26")
    saturday = store.get("2025-12-27")
    assert friday == AttendanceRecord(time_in="9:30 AM", time_out="6:30 PM", status=DayStatus.WORKING)
    assert saturday.status == DayStatus.OFF
    assert sum(1 for r in store.snapshot().values() if r.status == DayStatus.OFF) == 10


def test_reconcile_keeps_existing_entries():
    store = InMemoryAttendanceStore()
    store.reconcile(JAN_2026)
    store.set_field("2026-01-05", "timeIn", "10:00 AM")
    store.set_status("2026-01-06", DayStatus.LEAVE)

    store.reconcile(JAN_2026)

    assert store.get("2026-01-05").time_in == "10:00 AM"
    assert store.get("2026-01-06").status == DayStatus.LEAVE


def test_reconcile_is_idempotent():
    first = reconcile_records(JAN_2026, {})
    second = reconcile_records(JAN_2026, first)

    assert second == first


def test_reconcile_does_not_mutate_input():
    existing = {"2026-01-03": AttendanceRecord(status=DayStatus.WORKING)}
    result = reconcile_records(JAN_2026, existing)

    assert existing["2026-01-03"].status == DayStatus.WORKING
    assert result["2026-01-03"].status == DayStatus.OFF


@pytest.mark.parametrize("status", [DayStatus.WORKING, DayStatus.LEAVE, None])
def test_weekend_is_always_off_after_reconcile(status):
    existing = {d.isoformat(): AttendanceRecord(time_in="8:00", status=status) for d in JAN_2026}
    result = reconcile_records(JAN_2026, existing)

    for day in JAN_2026:
        record = result[day.isoformat()]
        assert record.time_in == "8:00"
        if day.weekday() >= 5:
            assert record.status == DayStatus.OFF
        elif status is None:
            assert record.status == DayStatus.WORKING
        else:
            assert record.status == status


def test_reconcile_keeps_dates_outside_the_window():
    store = InMemoryAttendanceStore()
    store.reconcile(JAN_2026)
    store.reconcile(generate_window("Feb", today=date(2026, 1, 15)))

    assert "2025-12-26" in store
    assert "2026-02-25" in store


def test_set_field_replaces_only_that_field():
    store = InMemoryAttendanceStore()
    store.reconcile(JAN_2026)

    assert store.set_field("2026-01-05", "timeOut", "not a time") is True
    record = store.get("2026-01-05")
    assert record.time_out == "not a time"
    assert record.time_in == "9:30 AM"
    assert record.status == DayStatus.WORKING


def test_set_field_unknown_date_is_noop():
    store = InMemoryAttendanceStore()
    store.reconcile(JAN_2026)
    before = store.snapshot()

    assert store.set_field("2030-01-01", "timeIn", "10:00") is False
    assert store.snapshot() == before


def test_set_field_rejects_unknown_field():
    store = InMemoryAttendanceStore()
    store.reconcile(JAN_2026)

    with pytest.raises(ValidationError):
        store.set_field("2026-01-05", "status", "leave")


def test_set_status_on_weekend_waits_for_next_reconcile():
    store = InMemoryAttendanceStore()
    store.reconcile(JAN_2026)

    assert store.set_status("2026-01-03", "Working") is True
    assert store.get("2026-01-03").status == DayStatus.WORKING

    store.reconcile(JAN_2026)
    assert store.get("2026-01-03").status == DayStatus.OFF


def test_set_status_rejects_unknown_value():
    store = InMemoryAttendanceStore()
    store.reconcile(JAN_2026)

    with pytest.raises(ValidationError):
        store.set_status("2026-01-05", "holiday")
    assert store.set_status("2030-01-01", "leave") is False


def test_keys_follow_the_reconciled_window():
    store = InMemoryAttendanceStore()
    assert store.keys() == []

    store.reconcile(JAN_2026)

    assert store.keys() == [d.isoformat() for d in JAN_2026]


def test_missing_status_is_repaired_and_state_is_serializable():
    store = InMemoryAttendanceStore(
        {
            "2026-01-05": AttendanceRecord(time_in="10:00 AM", status=DayStatus.LEAVE),
            "2026-01-06": AttendanceRecord(status=None),
        }
    )
    assert store.to_state()["2026-01-06"]["status"] is None

    store.reconcile(JAN_2026)

    assert store.get("2026-01-06").status == DayStatus.WORKING
    assert store.to_state()["2026-01-05"] == {"timeIn": "10:00 AM", "timeOut": "6:30 PM", "status": "leave"}
