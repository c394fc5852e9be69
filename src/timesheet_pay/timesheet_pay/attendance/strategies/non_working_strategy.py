from __future__ import annotations

from ..model import ZERO_METRICS, AttendanceRecord, DayMetrics
from .base import DayMetricsStrategy


class NonWorkingDayStrategy(DayMetricsStrategy):
    """Leave and off days accrue nothing."""

    def compute(self, record: AttendanceRecord, *, expected_in: int, expected_out: int) -> DayMetrics:
        return ZERO_METRICS
