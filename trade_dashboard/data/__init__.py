"""Data: trade file loading and tabular view."""

from trade_dashboard.data.loader import load_trades, parse_timestamp, trade_from_record, trades_to_frame

__all__ = ["load_trades", "parse_timestamp", "trade_from_record", "trades_to_frame"]
