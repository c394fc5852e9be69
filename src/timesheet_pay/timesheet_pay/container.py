from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Mapping, Optional

from .attendance.factory import DayMetricsCalculator, DayMetricsStrategyFactory
from .attendance.service import AttendanceService
from .core.constants import (
    DEFAULT_ATTENDANCE_BONUS,
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_LATE_THRESHOLD_MINUTES,
    DEFAULT_MAX_SESSIONS,
    DEFAULT_NO_LEAVE_BONUS,
)
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.service import PayrollService
from .session import SessionRegistry


@dataclass(frozen=True)
class Container:
    attendance_service: AttendanceService
    payroll_service: PayrollService
    sessions: SessionRegistry


def build_container(*, settings: Optional[Mapping[str, Any]] = None, clock: Callable[[], date] | None = None) -> Container:
    settings = settings or {}

    metrics_calculator = DayMetricsCalculator(strategy_factory=DayMetricsStrategyFactory())
    payroll_calculator = StandardPayrollCalculator(
        attendance_bonus=float(settings.get("ATTENDANCE_BONUS", DEFAULT_ATTENDANCE_BONUS)),
        no_leave_bonus=float(settings.get("NO_LEAVE_BONUS", DEFAULT_NO_LEAVE_BONUS)),
        late_threshold_minutes=int(settings.get("LATE_THRESHOLD_MINUTES", DEFAULT_LATE_THRESHOLD_MINUTES)),
    )
    currency_symbol = str(settings.get("CURRENCY_SYMBOL", DEFAULT_CURRENCY_SYMBOL))

    attendance_service = AttendanceService(calculator=metrics_calculator)
    payroll_service = PayrollService(
        calculator=payroll_calculator,
        metrics=metrics_calculator,
        currency_symbol=currency_symbol,
    )
    sessions = SessionRegistry(
        attendance_service=attendance_service,
        payroll_service=payroll_service,
        clock=clock,
        max_sessions=int(settings.get("MAX_SESSIONS", DEFAULT_MAX_SESSIONS)),
    )

    return Container(
        attendance_service=attendance_service,
        payroll_service=payroll_service,
        sessions=sessions,
    )
