from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Iterable, Mapping, Optional

from ..common.datetime_utils import date_key, is_weekend
from ..common.logging_config import get_logger
from ..core.constants import DEFAULT_TIME_IN, DEFAULT_TIME_OUT
from ..core.enums import DayStatus
from ..core.exceptions import ValidationError
from .model import AttendanceRecord

logger = get_logger("attendance.store")

# Wire names used by the page plus the attribute names themselves.
FIELD_NAMES = {
    "timeIn": "time_in",
    "timeOut": "time_out",
    "time_in": "time_in",
    "time_out": "time_out",
}


def default_status(day: date) -> DayStatus:
    return DayStatus.OFF if is_weekend(day) else DayStatus.WORKING


def effective_status(day: date, record: AttendanceRecord) -> DayStatus:
    """Stored status, or the default for that date when none is set yet."""
    return record.status or default_status(day)


def reconcile_records(
    dates: Iterable[date],
    records: Mapping[str, AttendanceRecord],
) -> dict[str, AttendanceRecord]:
    """Return a copy of ``records`` covering every date in ``dates``.

    Missing dates get default times and status; existing entries keep their
    values, except that a missing status gets the default and a weekend is
    always forced back to OFF. Entries outside ``dates`` are kept untouched.
    """
    result = dict(records)
    created = corrected = 0

    for day in dates:
        key = date_key(day)
        record = result.get(key)
        if record is None:
            result[key] = AttendanceRecord(
                time_in=DEFAULT_TIME_IN,
                time_out=DEFAULT_TIME_OUT,
                status=default_status(day),
            )
            created += 1
        elif record.status is None:
            result[key] = replace(record, status=default_status(day))
            corrected += 1
        elif is_weekend(day) and record.status != DayStatus.OFF:
            result[key] = replace(record, status=DayStatus.OFF)
            corrected += 1

    if created or corrected:
        logger.debug("reconciled records: created=%d corrected=%d", created, corrected)
    return result


class InMemoryAttendanceStore:
    """Session-scoped mapping of date key to attendance record."""

    def __init__(self, records: Optional[Mapping[str, AttendanceRecord]] = None):
        self._records: dict[str, AttendanceRecord] = dict(records or {})

    def __contains__(self, date_key: object) -> bool:
        return date_key in self._records

    def __len__(self) -> int:
        return len(self._records)

    def keys(self) -> list[str]:
        return list(self._records)

    def get(self, date_key: str) -> Optional[AttendanceRecord]:
        return self._records.get(date_key)

    def snapshot(self) -> dict[str, AttendanceRecord]:
        return dict(self._records)

    def reconcile(self, dates: Iterable[date]) -> dict[str, AttendanceRecord]:
        self._records = reconcile_records(dates, self._records)
        return self.snapshot()

    def set_field(self, date_key: str, field: str, value: str) -> bool:
        attr = FIELD_NAMES.get(field)
        if attr is None:
            raise ValidationError(f"Unknown attendance field: {field!r}")

        record = self._records.get(date_key)
        if record is None:
            return False
        self._records[date_key] = replace(record, **{attr: "" if value is None else str(value)})
        return True

    def set_status(self, date_key: str, status: DayStatus | str) -> bool:
        try:
            new_status = DayStatus.coerce(status)
        except ValueError:
            raise ValidationError(f"Unknown status: {status!r}") from None

        record = self._records.get(date_key)
        if record is None:
            return False
        self._records[date_key] = replace(record, status=new_status)
        return True

    def to_state(self) -> dict[str, dict[str, Any]]:
        """JSON-friendly form: {dateKey: {timeIn, timeOut, status}}."""
        return {
            key: {
                "timeIn": record.time_in,
                "timeOut": record.time_out,
                "status": record.status.value if record.status else None,
            }
            for key, record in self._records.items()
        }

