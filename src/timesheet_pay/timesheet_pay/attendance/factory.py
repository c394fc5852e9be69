from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.constants import EXPECTED_TIME_IN_MINUTES, EXPECTED_TIME_OUT_MINUTES
from ..core.enums import DayStatus
from .model import ZERO_METRICS, AttendanceRecord, DayMetrics
from .strategies.base import DayMetricsStrategy
from .strategies.non_working_strategy import NonWorkingDayStrategy
from .strategies.working_strategy import WorkingDayStrategy


@dataclass
class DayMetricsStrategyFactory:
    """Factory Pattern: choose the metrics strategy from the day status."""

    working: DayMetricsStrategy = field(default_factory=WorkingDayStrategy)
    non_working: DayMetricsStrategy = field(default_factory=NonWorkingDayStrategy)

    def for_record(self, record: Optional[AttendanceRecord]) -> DayMetricsStrategy:
        if record is None or record.status != DayStatus.WORKING:
            return self.non_working
        return self.working


class DayMetricsCalculator:
    def __init__(
        self,
        *,
        strategy_factory: DayMetricsStrategyFactory | None = None,
        expected_in: int = EXPECTED_TIME_IN_MINUTES,
        expected_out: int = EXPECTED_TIME_OUT_MINUTES,
    ):
        self._factory = strategy_factory or DayMetricsStrategyFactory()
        self._expected_in = int(expected_in)
        self._expected_out = int(expected_out)

    def metrics(self, record: Optional[AttendanceRecord]) -> DayMetrics:
        if record is None:
            return ZERO_METRICS
        strategy = self._factory.for_record(record)
        return strategy.compute(record, expected_in=self._expected_in, expected_out=self._expected_out)
