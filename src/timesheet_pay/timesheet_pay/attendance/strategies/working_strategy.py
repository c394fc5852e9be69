from __future__ import annotations

from ...common.time_parser import parse_time
from ..model import ZERO_METRICS, AttendanceRecord, DayMetrics
from .base import DayMetricsStrategy


class WorkingDayStrategy(DayMetricsStrategy):
    """Lateness, earliness and hours from the entered clock times."""

    def compute(self, record: AttendanceRecord, *, expected_in: int, expected_out: int) -> DayMetrics:
        time_in = parse_time(record.time_in)
        time_out = parse_time(record.time_out)
        if time_in is None or time_out is None:
            return ZERO_METRICS

        actual_in = time_in.total_minutes
        actual_out = time_out.total_minutes

        # Overnight shifts are not supported: out before in counts as zero.
        working_minutes = max(0, actual_out - actual_in)
        return DayMetrics(
            minutes_late=max(0, actual_in - expected_in),
            minutes_early=max(0, expected_out - actual_out),
            working_hours=working_minutes / 60,
        )
