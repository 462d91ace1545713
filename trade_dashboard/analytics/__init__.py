"""Analytics: filtering, statistics, drawdown, breakdowns."""

from trade_dashboard.analytics.filters import filter_trades
from trade_dashboard.analytics.stats import TradingStats, calculate_stats
from trade_dashboard.analytics.drawdown import (
    RiskLevel,
    drawdown_series,
    max_drawdown,
    max_drawdown_from_trades,
    prepare_chart_data,
    risk_level,
)
from trade_dashboard.analytics.breakdowns import (
    TradingSession,
    daily_breakdown,
    direction_breakdown,
    fee_summary,
    fees_by_order_type,
    fees_by_symbol,
    hourly_breakdown,
    order_type_breakdown,
    session_breakdown,
    volume_by_symbol,
)
from trade_dashboard.analytics.validation import TradeIssue, find_inconsistencies
from trade_dashboard.analytics.report import DashboardReport, build_report

__all__ = [
    "filter_trades",
    "TradingStats",
    "calculate_stats",
    "RiskLevel",
    "drawdown_series",
    "max_drawdown",
    "max_drawdown_from_trades",
    "prepare_chart_data",
    "risk_level",
    "TradingSession",
    "daily_breakdown",
    "direction_breakdown",
    "fee_summary",
    "fees_by_order_type",
    "fees_by_symbol",
    "hourly_breakdown",
    "order_type_breakdown",
    "session_breakdown",
    "volume_by_symbol",
    "TradeIssue",
    "find_inconsistencies",
    "DashboardReport",
    "build_report",
]
