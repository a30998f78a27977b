"""
Display Formatters
==================
UI-only transformations for amounts, percentages and the header clock.
Does NOT round or modify stored ledger values.
"""

from datetime import datetime
from typing import Optional

PLACEHOLDER = "—"


def format_amount(value: float, currency: str = "Kč") -> str:
    """
    Amount with thousands separators and the currency label.

    Whole numbers show no decimals; fractional amounts show two.

    Example:
        1100 -> "1,100 Kč"
    """
    if value is None:
        value = 0
    if float(value).is_integer():
        text = f"{value:,.0f}"
    else:
        text = f"{value:,.2f}"
    return f"{text} {currency}".strip()


def format_progress(pct: Optional[float]) -> str:
    """Progress with one decimal, or a placeholder when the target is 0."""
    if pct is None:
        return PLACEHOLDER
    return f"{pct:.1f}%"


def format_clock(now: datetime) -> str:
    """Header clock: day.month.year hours:minutes:seconds."""
    return now.strftime("%d.%m.%Y %H:%M:%S")
