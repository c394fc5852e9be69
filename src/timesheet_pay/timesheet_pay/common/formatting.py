"""Display-boundary formatting.

Values are kept at full precision everywhere else; rounding and grouping
happen only here.
"""

from __future__ import annotations

import math

from ..core.constants import DEFAULT_CURRENCY_SYMBOL


def format_hours(hours: float) -> str:
    return f"{hours:.2f}"


def format_minutes(minutes: int) -> str:
    """Positive minute counts as digits, zero as a dash."""
    return str(minutes) if minutes > 0 else "-"


def group_indian(amount: float, *, decimals: int = 2) -> str:
    """Group digits the en-IN way: last three, then pairs (12,34,567.00)."""
    if not math.isfinite(amount):
        amount = 0.0
    sign = "-" if amount < 0 else ""
    text = f"{abs(amount):.{decimals}f}"
    whole, _, fraction = text.partition(".")

    head, tail = whole[:-3], whole[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    groups.append(tail)

    grouped = ",".join(groups)
    return f"{sign}{grouped}.{fraction}" if fraction else f"{sign}{grouped}"


def format_currency(amount: float, *, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    return f"{symbol}{group_indian(amount)}"
