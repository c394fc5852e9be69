from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Iterable, Sequence

from ..common.datetime_utils import date_key, is_weekend
from ..common.formatting import format_hours, format_minutes
from ..core.constants import MONTHS
from .factory import DayMetricsCalculator
from .model import AttendanceRecord
from .repository import AttendanceStore
from .store import default_status, effective_status

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


class AttendanceService:
    def __init__(self, *, calculator: DayMetricsCalculator | None = None):
        self._calculator = calculator or DayMetricsCalculator()

    def reconcile(self, store: AttendanceStore, dates: Iterable[date]) -> None:
        store.reconcile(dates)

    def rows(self, store: AttendanceStore, dates: Sequence[date]) -> list[dict]:
        return [self._to_ui(day, store.get(date_key(day))) for day in dates]

    def _to_ui(self, day: date, record: AttendanceRecord | None) -> dict:
        if record is None:
            record = AttendanceRecord(status=default_status(day))
            metrics = self._calculator.metrics(None)
        else:
            record = replace(record, status=effective_status(day, record))
            metrics = self._calculator.metrics(record)

        css = ""
        if metrics.minutes_late > 0:
            css = "late"
        elif metrics.minutes_early > 0:
            css = "early"

        status = record.status
        return {
            "date_key": date_key(day),
            "date": f"{MONTHS[day.month - 1]} {day.day}, {day.year}",
            "weekday": WEEKDAYS[day.weekday()],
            "is_weekend": is_weekend(day),
            "time_in": record.time_in,
            "time_out": record.time_out,
            "status": status.value,
            "minutes_late": metrics.minutes_late,
            "minutes_early": metrics.minutes_early,
            "minutes_late_label": format_minutes(metrics.minutes_late),
            "minutes_early_label": format_minutes(metrics.minutes_early),
            "working_hours": format_hours(metrics.working_hours),
            "css_class": css,
        }
