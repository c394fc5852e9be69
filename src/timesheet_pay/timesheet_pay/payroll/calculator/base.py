from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import PayrollSummary


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def summarize(
        self,
        *,
        total_minutes_late: int,
        total_minutes_early: int,
        leave_count: int,
        basic_pay: float,
    ) -> PayrollSummary:
        raise NotImplementedError
