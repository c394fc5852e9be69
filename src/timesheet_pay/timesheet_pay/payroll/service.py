from __future__ import annotations

import math
import re
from dataclasses import replace
from datetime import date
from typing import Any, Iterable, Optional

from ..attendance.factory import DayMetricsCalculator
from ..attendance.repository import AttendanceStore
from ..attendance.store import effective_status
from ..common.datetime_utils import date_key, is_weekend
from ..common.formatting import format_currency
from ..core.constants import DEFAULT_CURRENCY_SYMBOL
from ..core.enums import DayStatus
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollSummary

_LEADING_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_amount(value: Any) -> float:
    """Lenient amount parsing: use the leading number, else 0.

    ``"30000"`` -> 30000.0, ``"30000abc"`` -> 30000.0, ``"abc"`` -> 0.0.
    """
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        amount = float(value)
    else:
        match = _LEADING_NUMBER.match(str(value).strip())
        if not match:
            return 0.0
        amount = float(match.group(0))
    return amount if math.isfinite(amount) else 0.0


class PayrollService:
    def __init__(
        self,
        *,
        calculator: Optional[PayrollCalculator] = None,
        metrics: Optional[DayMetricsCalculator] = None,
        currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
    ):
        self._calculator = calculator or StandardPayrollCalculator()
        self._metrics = metrics or DayMetricsCalculator()
        self._currency_symbol = currency_symbol

    def aggregate(self, dates: Iterable[date], store: AttendanceStore, basic_pay: Any) -> PayrollSummary:
        """Fold every day of the window into a payroll summary.

        Only weekday records count: leave days add to the leave count and
        working days add their lateness and earliness. A record without a
        status counts with the default for its date. Weekend records are
        skipped whatever status they carry.
        """
        total_late = 0
        total_early = 0
        leave_count = 0

        for day in dates:
            record = store.get(date_key(day))
            if record is None or is_weekend(day):
                continue
            status = effective_status(day, record)
            if status == DayStatus.LEAVE:
                leave_count += 1
            elif status == DayStatus.WORKING:
                metrics = self._metrics.metrics(replace(record, status=status))
                total_late += metrics.minutes_late
                total_early += metrics.minutes_early

        return self._calculator.summarize(
            total_minutes_late=total_late,
            total_minutes_early=total_early,
            leave_count=leave_count,
            basic_pay=parse_amount(basic_pay),
        )

    def _money(self, amount: float) -> str:
        return format_currency(amount, symbol=self._currency_symbol)

    def summary_ui(self, summary: PayrollSummary) -> dict:
        money = self._money
        return {
            "total_minutes_late": summary.total_minutes_late,
            "total_minutes_early": summary.total_minutes_early,
            "leave_count": summary.leave_count,
            "basic_pay": money(summary.basic_pay),
            "attendance_bonus": money(summary.attendance_bonus),
            "no_leave_bonus": money(summary.no_leave_bonus),
            "total_bonus": money(summary.total_bonus),
            "leave_deduction": money(summary.leave_deduction),
            "total_pay": money(summary.total_pay),
        }
