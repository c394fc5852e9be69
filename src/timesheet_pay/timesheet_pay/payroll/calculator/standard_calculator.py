from __future__ import annotations

from ...core.constants import (
    DEFAULT_ATTENDANCE_BONUS,
    DEFAULT_DEDUCTION_DIVISOR,
    DEFAULT_FREE_LEAVE_DAYS,
    DEFAULT_LATE_THRESHOLD_MINUTES,
    DEFAULT_NO_LEAVE_BONUS,
)
from ..model import PayrollSummary
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule.

    - attendance bonus unless total lateness reaches the threshold
    - no-leave bonus only when no leave was taken
    - first leave day free, each further one costs basic_pay / divisor
    """

    def __init__(
        self,
        *,
        attendance_bonus: float = DEFAULT_ATTENDANCE_BONUS,
        no_leave_bonus: float = DEFAULT_NO_LEAVE_BONUS,
        late_threshold_minutes: int = DEFAULT_LATE_THRESHOLD_MINUTES,
        free_leave_days: int = DEFAULT_FREE_LEAVE_DAYS,
        deduction_divisor: int = DEFAULT_DEDUCTION_DIVISOR,
    ):
        self._attendance_bonus = attendance_bonus
        self._no_leave_bonus = no_leave_bonus
        self._late_threshold = int(late_threshold_minutes)
        self._free_leave_days = int(free_leave_days)
        self._divisor = int(deduction_divisor)

    def summarize(
        self,
        *,
        total_minutes_late: int,
        total_minutes_early: int,
        leave_count: int,
        basic_pay: float,
    ) -> PayrollSummary:
        attendance_bonus = 0 if total_minutes_late >= self._late_threshold else self._attendance_bonus
        no_leave_bonus = self._no_leave_bonus if leave_count == 0 else 0
        total_bonus = attendance_bonus + no_leave_bonus

        chargeable_days = max(0, leave_count - self._free_leave_days)
        leave_deduction = chargeable_days * (basic_pay / self._divisor)

        return PayrollSummary(
            total_minutes_late=total_minutes_late,
            total_minutes_early=total_minutes_early,
            leave_count=leave_count,
            basic_pay=basic_pay,
            attendance_bonus=attendance_bonus,
            no_leave_bonus=no_leave_bonus,
            total_bonus=total_bonus,
            leave_deduction=leave_deduction,
            total_pay=basic_pay + total_bonus - leave_deduction,
        )
