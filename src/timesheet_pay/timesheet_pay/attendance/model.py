from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_TIME_IN, DEFAULT_TIME_OUT
from ..core.enums import DayStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one day's attendance entry.

    Times stay raw user strings; they are parsed on read so an invalid entry
    is kept verbatim for correction. ``status`` is None only for entries
    restored from incomplete state, until the next reconcile.
    """

    time_in: str = DEFAULT_TIME_IN
    time_out: str = DEFAULT_TIME_OUT
    status: Optional[DayStatus] = None


@dataclass(frozen=True)
class DayMetrics:
    minutes_late: int = 0
    minutes_early: int = 0
    working_hours: float = 0.0


ZERO_METRICS = DayMetrics()
