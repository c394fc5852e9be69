from __future__ import annotations

from enum import Enum


class DayStatus(str, Enum):
    """Attendance status of one calendar day in the payroll window."""

    WORKING = "working"
    LEAVE = "leave"
    OFF = "off"

    @classmethod
    def coerce(cls, value: "DayStatus | str") -> "DayStatus":
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())
