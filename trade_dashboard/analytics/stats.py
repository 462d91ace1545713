"""
Summary statistics over closed trades: PnL, volume, fees, win rate,
average win/loss, duration and long/short split.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List

from trade_dashboard.core.types import Trade, TradeDirection

SECONDS_PER_HOUR = 3600.0


@dataclass
class TradingStats:
    """Aggregate statistics for a set of closed trades."""
    total_pnl: float = 0.0
    total_volume: float = 0.0
    total_fees: float = 0.0
    total_trades: int = 0
    winning_trades: int = 0
    losing_trades: int = 0
    win_rate: float = 0.0
    average_win: float = 0.0
    average_loss: float = 0.0
    largest_win: float = 0.0
    largest_loss: float = 0.0
    average_trade_duration: float = 0.0  # hours
    long_trades: int = 0
    short_trades: int = 0
    long_short_ratio: float = 0.0


def closed_trades(trades: Iterable[Trade]) -> List[Trade]:
    return [t for t in trades if t.is_closed]


def win_rate(pnls: List[float]) -> float:
    """Percent of trades with positive PnL. Breakeven trades stay in the denominator."""
    if not pnls:
        return 0.0
    return sum(1 for p in pnls if p > 0) / len(pnls) * 100.0


def average_trade_duration_hours(trades: Iterable[Trade]) -> float:
    """Mean exit - entry in hours, over trades that have an exit time."""
    durations = [
        (t.exit_time - t.entry_time).total_seconds() for t in trades if t.exit_time is not None
    ]
    if not durations:
        return 0.0
    return sum(durations) / len(durations) / SECONDS_PER_HOUR


def long_short_ratio(long_count: int, short_count: int) -> float:
    """long / short, or the long count when there are no shorts."""
    if short_count > 0:
        return long_count / short_count
    return float(long_count)


def calculate_stats(trades: Iterable[Trade]) -> TradingStats:
    """
    Compute the statistics bundle. Open trades are ignored; with no closed
    trades every field is zero.
    """
    closed = closed_trades(trades)
    if not closed:
        return TradingStats()

    pnls = [t.pnl for t in closed]
    wins = [p for p in pnls if p > 0]
    losses = [p for p in pnls if p < 0]
    long_count = sum(1 for t in closed if t.direction == TradeDirection.LONG)
    short_count = sum(1 for t in closed if t.direction == TradeDirection.SHORT)

    return TradingStats(
        total_pnl=sum(pnls),
        total_volume=sum(t.notional for t in closed),
        total_fees=sum(t.fees for t in closed),
        total_trades=len(closed),
        winning_trades=len(wins),
        losing_trades=len(losses),
        win_rate=win_rate(pnls),
        average_win=sum(wins) / len(wins) if wins else 0.0,
        average_loss=sum(losses) / len(losses) if losses else 0.0,
        largest_win=max(wins) if wins else 0.0,
        largest_loss=min(losses) if losses else 0.0,
        average_trade_duration=average_trade_duration_hours(closed),
        long_trades=long_count,
        short_trades=short_count,
        long_short_ratio=long_short_ratio(long_count, short_count),
    )
