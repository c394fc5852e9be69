from __future__ import annotations

import uuid
from collections import OrderedDict
from datetime import date
from typing import Any, Callable, Optional

from .attendance.service import AttendanceService
from .attendance.store import InMemoryAttendanceStore
from .calendar.generator import generate_window
from .common.datetime_utils import now_local
from .common.logging_config import get_logger
from .core.constants import DEFAULT_MAX_SESSIONS
from .core.enums import DayStatus
from .payroll.model import PayrollSummary
from .payroll.service import PayrollService

logger = get_logger("session")


class PayrollSession:
    """One user's working state: selected month, basic pay and the store.

    The store is the only mutable piece; rows and the summary are
    recomputed from scratch on every call. Callers invoke ``summary()``
    after each edit.
    """

    def __init__(
        self,
        *,
        attendance_service: AttendanceService,
        payroll_service: PayrollService,
        store: Optional[InMemoryAttendanceStore] = None,
        month: str = "",
        basic_pay: str = "",
        clock: Callable[[], date] | None = None,
    ):
        self._attendance = attendance_service
        self._payroll = payroll_service
        self._clock = clock or (lambda: now_local().date())
        self.store = store or InMemoryAttendanceStore()
        self.month = month
        self.basic_pay = basic_pay
        self._reconciled: list[date] = []

    def dates(self) -> list[date]:
        """Current window; the store is reconciled whenever it changes."""
        if not self.month:
            return []
        dates = generate_window(self.month, today=self._clock())
        if dates != self._reconciled:
            self._reconcile(dates)
        return dates

    def _reconcile(self, dates: list[date]) -> None:
        if dates:
            self._attendance.reconcile(self.store, dates)
        self._reconciled = list(dates)

    def select_month(self, month: str) -> list[date]:
        self.month = month
        dates = generate_window(month, today=self._clock()) if month else []
        self._reconcile(dates)
        return dates

    def set_basic_pay(self, raw: Any) -> None:
        self.basic_pay = "" if raw is None else str(raw)

    def edit_field(self, date_key: str, field: str, value: str) -> bool:
        return self.store.set_field(date_key, field, value)

    def edit_status(self, date_key: str, status: DayStatus | str) -> bool:
        return self.store.set_status(date_key, status)

    def rows(self) -> list[dict]:
        return self._attendance.rows(self.store, self.dates())

    def summary(self) -> PayrollSummary:
        return self._payroll.aggregate(self.dates(), self.store, self.basic_pay)

    def summary_ui(self) -> dict:
        return self._payroll.summary_ui(self.summary())


class SessionRegistry:
    """Process-local map of browser session id to PayrollSession.

    Holds at most ``max_sessions`` entries; the least recently used one is
    dropped first. Nothing is written to disk.
    """

    def __init__(
        self,
        *,
        attendance_service: AttendanceService,
        payroll_service: PayrollService,
        clock: Callable[[], date] | None = None,
        max_sessions: int = DEFAULT_MAX_SESSIONS,
    ):
        self._attendance = attendance_service
        self._payroll = payroll_service
        self._clock = clock
        self._max_sessions = max(1, int(max_sessions))
        self._sessions: OrderedDict[str, PayrollSession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def new_id(self) -> str:
        return uuid.uuid4().hex

    def get(self, session_id: str) -> PayrollSession:
        session = self._sessions.get(session_id)
        if session is not None:
            self._sessions.move_to_end(session_id)
            return session

        session = PayrollSession(
            attendance_service=self._attendance,
            payroll_service=self._payroll,
            clock=self._clock,
        )
        self._sessions[session_id] = session
        while len(self._sessions) > self._max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.debug("evicted session %s", evicted)
        return session
