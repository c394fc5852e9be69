from __future__ import annotations

from datetime import date, datetime


def date_key(value: date) -> str:
    """Canonical store key for a calendar date."""
    return value.strftime("%Y-%m-%d")


def is_weekend(value: date) -> bool:
    return value.weekday() >= 5


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
