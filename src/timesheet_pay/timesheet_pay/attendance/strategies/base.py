from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import AttendanceRecord, DayMetrics


class DayMetricsStrategy(ABC):
    """Strategy Pattern: encapsulate how one day's metrics are derived."""

    @abstractmethod
    def compute(self, record: AttendanceRecord, *, expected_in: int, expected_out: int) -> DayMetrics:
        raise NotImplementedError
