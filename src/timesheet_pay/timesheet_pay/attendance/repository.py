from __future__ import annotations

from datetime import date
from typing import Iterable, Mapping, Optional, Protocol

from ..core.enums import DayStatus
from .model import AttendanceRecord


class AttendanceStore(Protocol):
    def keys(self) -> list[str]:
        raise NotImplementedError

    def get(self, date_key: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def snapshot(self) -> Mapping[str, AttendanceRecord]:
        raise NotImplementedError

    def reconcile(self, dates: Iterable[date]) -> Mapping[str, AttendanceRecord]:
        raise NotImplementedError

    def set_field(self, date_key: str, field: str, value: str) -> bool:
        raise NotImplementedError

    def set_status(self, date_key: str, status: DayStatus | str) -> bool:
        """Replace the status of one day.

        Does not re-check the weekend rule; the next reconcile restores it.
        """

        raise NotImplementedError
