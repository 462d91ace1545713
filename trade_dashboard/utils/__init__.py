"""Utils: display formatting."""

from trade_dashboard.utils.formatting import format_currency, format_duration, format_percentage

__all__ = ["format_currency", "format_duration", "format_percentage"]
