"""Display formatting for currency, percentages and durations."""

from __future__ import annotations
import math
from numbers import Real

NOT_AVAILABLE = "N/A"


def format_currency(value: float) -> str:
    """USD with thousands separators and 2 decimals: -1234.5 -> '-$1,234.50'."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_percentage(value: float) -> str:
    return f"{value:.2f}%"


def format_duration(milliseconds) -> str:
    """
    Render a millisecond count as 'Xh Ym Zs', dropping zero units but always
    keeping seconds when nothing else is shown. 'N/A' for negative or non-numeric input.
    """
    if isinstance(milliseconds, bool) or not isinstance(milliseconds, Real):
        return NOT_AVAILABLE
    if math.isnan(milliseconds) or math.isinf(milliseconds) or milliseconds < 0:
        return NOT_AVAILABLE

    total_seconds = int(milliseconds // 1000)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)

    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if seconds > 0 or not parts:
        parts.append(f"{seconds}s")
    return " ".join(parts)
