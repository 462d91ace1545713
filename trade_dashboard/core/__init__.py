"""Core: config, types, logging."""

from trade_dashboard.core.config import load_config, Config
from trade_dashboard.core.types import (
    ALL_SYMBOLS,
    ChartDataPoint,
    DateRange,
    DrawdownPoint,
    FilterOptions,
    OrderType,
    Trade,
    TradeDirection,
    TradeStatus,
    TradingSymbol,
    parse_symbol_filter,
)
from trade_dashboard.core.logger import setup_logging, setup_logging_from_config

__all__ = [
    "load_config",
    "Config",
    "ALL_SYMBOLS",
    "ChartDataPoint",
    "DateRange",
    "DrawdownPoint",
    "FilterOptions",
    "OrderType",
    "Trade",
    "TradeDirection",
    "TradeStatus",
    "TradingSymbol",
    "parse_symbol_filter",
    "setup_logging",
    "setup_logging_from_config",
]
