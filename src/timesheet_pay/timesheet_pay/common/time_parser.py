from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional

_TIME_24H = re.compile(r"([0-9]{1,2}):([0-9]{2})")
_TIME_12H = re.compile(r"([0-9]{1,2}):([0-9]{2})\s*(AM|PM)")


@dataclass(frozen=True)
class ParsedTime:
    """Clock time normalized to minutes since midnight."""

    hours: int
    minutes: int

    @property
    def total_minutes(self) -> int:
        return self.hours * 60 + self.minutes


def parse_time(text: Any) -> Optional[ParsedTime]:
    """Parse free-form clock text like ``9:30 AM``, ``09:30`` or ``21:30``.

    24-hour form is tried first, then 12-hour form with an AM/PM suffix.
    Returns None for empty input and for anything that does not match or is
    out of range; never raises.
    """
    if not isinstance(text, str) or not text.strip():
        return None

    normalized = text.strip().upper()

    match = _TIME_24H.fullmatch(normalized)
    if match:
        hours, minutes = int(match.group(1)), int(match.group(2))
        if 0 <= hours < 24 and 0 <= minutes < 60:
            return ParsedTime(hours=hours, minutes=minutes)

    match = _TIME_12H.fullmatch(normalized)
    if match:
        hours, minutes = int(match.group(1)), int(match.group(2))
        period = match.group(3)
        if 1 <= hours <= 12 and 0 <= minutes < 60:
            if period == "PM" and hours != 12:
                hours += 12
            elif period == "AM" and hours == 12:
                hours = 0
            return ParsedTime(hours=hours, minutes=minutes)

    return None
