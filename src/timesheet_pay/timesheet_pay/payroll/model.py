from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PayrollSummary:
    """Read-model: totals for one payroll window, recomputed on every read."""

    total_minutes_late: int
    total_minutes_early: int
    leave_count: int
    basic_pay: float
    attendance_bonus: float
    no_leave_bonus: float
    total_bonus: float
    leave_deduction: float
    total_pay: float
