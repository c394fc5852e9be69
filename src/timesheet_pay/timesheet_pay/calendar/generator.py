from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.constants import MONTHS, WINDOW_END_DAY, WINDOW_START_DAY


def window_bounds(month_name: str, *, today: Optional[date] = None) -> Optional[tuple[date, date]]:
    """Start and end of the payroll window ending in ``month_name``.

    Both bounds are anchored to the year of ``today`` (the local clock when
    omitted): the start is the 26th of the previous month, moved back a year
    for January, and the end is always the 25th of ``month_name`` in that same
    year. A window for a past or future year can therefore not be produced.
    """
    if month_name not in MONTHS:
        return None

    today = today or now_local().date()
    month_index = MONTHS.index(month_name)
    current_year = today.year

    prev_index = month_index - 1
    start_year = current_year
    if prev_index < 0:
        prev_index = 11
        start_year = current_year - 1

    start = date(start_year, prev_index + 1, WINDOW_START_DAY)
    end = date(current_year, month_index + 1, WINDOW_END_DAY)
    return start, end


def generate_window(month_name: str, *, today: Optional[date] = None) -> list[date]:
    """Every calendar date of the payroll window, oldest first.

    Unknown month names yield an empty list.
    """
    bounds = window_bounds(month_name, today=today)
    if bounds is None:
        return []

    start, end = bounds
    dates = []
    current = start
    while current <= end:
        dates.append(current)
        current += timedelta(days=1)
    return dates
