"""
Dashboard report: everything the presentation layer renders for one filter state.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from trade_dashboard.core.types import (
    ChartDataPoint,
    DrawdownPoint,
    FilterOptions,
    OrderType,
    Trade,
    TradeDirection,
)
from trade_dashboard.analytics.filters import filter_trades
from trade_dashboard.analytics.stats import TradingStats, calculate_stats
from trade_dashboard.analytics.drawdown import (
    RiskLevel,
    drawdown_series,
    max_drawdown,
    prepare_chart_data,
    risk_level,
)
from trade_dashboard.analytics.breakdowns import (
    BucketStats,
    DirectionStats,
    FeeShare,
    FeeSummary,
    OrderTypeStats,
    SymbolAmount,
    TradingSession,
    VolumeBreakdown,
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

logger = logging.getLogger("trade_dashboard.report")


@dataclass
class DashboardReport:
    """Filtered trades plus every derived statistic, chart series and breakdown."""
    filters: FilterOptions
    trades: List[Trade] = field(default_factory=list)
    stats: TradingStats = field(default_factory=TradingStats)
    chart: List[ChartDataPoint] = field(default_factory=list)
    drawdown: List[DrawdownPoint] = field(default_factory=list)
    max_drawdown: float = 0.0
    risk_level: RiskLevel = RiskLevel.LOW
    order_types: Dict[OrderType, OrderTypeStats] = field(default_factory=dict)
    fees_by_order_type: Dict[OrderType, FeeShare] = field(default_factory=dict)
    fees_by_symbol: List[SymbolAmount] = field(default_factory=list)
    fee_summary: FeeSummary = field(default_factory=FeeSummary)
    volume: VolumeBreakdown = field(default_factory=VolumeBreakdown)
    directions: Dict[TradeDirection, DirectionStats] = field(default_factory=dict)
    hourly: Dict[int, BucketStats] = field(default_factory=dict)
    daily: Dict[int, BucketStats] = field(default_factory=dict)
    sessions: Dict[TradingSession, BucketStats] = field(default_factory=dict)


def build_report(
    trades: Iterable[Trade],
    filters: FilterOptions,
    drawdown_medium_pct: float = 10.0,
    drawdown_high_pct: float = 20.0,
) -> DashboardReport:
    """Filter once, then run each aggregator independently over the same subset."""
    filtered = filter_trades(trades, filters)
    chart = prepare_chart_data(filtered)
    dd_points = drawdown_series(chart)
    max_dd = max_drawdown([p.cumulative_pnl for p in chart])
    report = DashboardReport(
        filters=filters,
        trades=filtered,
        stats=calculate_stats(filtered),
        chart=chart,
        drawdown=dd_points,
        max_drawdown=max_dd,
        risk_level=risk_level(max_dd, drawdown_medium_pct, drawdown_high_pct),
        order_types=order_type_breakdown(filtered),
        fees_by_order_type=fees_by_order_type(filtered),
        fees_by_symbol=fees_by_symbol(filtered),
        fee_summary=fee_summary(filtered),
        volume=volume_by_symbol(filtered),
        directions=direction_breakdown(filtered),
        hourly=hourly_breakdown(filtered),
        daily=daily_breakdown(filtered),
        sessions=session_breakdown(filtered),
    )
    logger.debug(
        "Report: %d trades, pnl=%.2f, max_dd=%.2f%% (%s)",
        len(filtered), report.stats.total_pnl, max_dd, report.risk_level.value,
    )
    return report
