"""
Per-bucket breakdowns: order type, symbol (fees, volume), direction,
hour of day, day of week, trading session.

Fixed-key breakdowns are keyed by enum and always hold every bucket.
All PnL figures use the stored trade.pnl.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List

from trade_dashboard.core.types import OrderType, Trade, TradeDirection

DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


class TradingSession(str, Enum):
    ASIAN = "Asian"
    EUROPEAN = "European"
    AMERICAN = "American"

    @property
    def hours(self) -> range:
        return _SESSION_HOURS[self]

    @property
    def label(self) -> str:
        start, stop = self.hours.start, self.hours.stop % 24
        return f"{start:02d}:00-{stop:02d}:00"

    @classmethod
    def for_hour(cls, hour: int) -> "TradingSession":
        for session in cls:
            if hour in session.hours:
                return session
        raise ValueError(f"Hour out of range: {hour}")


_SESSION_HOURS = {
    TradingSession.ASIAN: range(0, 8),
    TradingSession.EUROPEAN: range(8, 16),
    TradingSession.AMERICAN: range(16, 24),
}


def _ratio(part: float, whole: float) -> float:
    return part / whole if whole else 0.0


@dataclass
class OrderTypeStats:
    total_trades: int = 0
    winning_trades: int = 0
    losing_trades: int = 0
    total_pnl: float = 0.0
    total_fees: float = 0.0

    @property
    def avg_pnl(self) -> float:
        return _ratio(self.total_pnl, self.total_trades)

    @property
    def win_rate(self) -> float:
        return _ratio(self.winning_trades, self.total_trades) * 100.0


@dataclass
class FeeShare:
    value: float
    percentage: float


@dataclass
class SymbolAmount:
    symbol: str
    amount: float


@dataclass
class FeeSummary:
    total: float = 0.0
    average: float = 0.0
    highest: float = 0.0
    lowest: float = 0.0


@dataclass
class DirectionStats:
    count: int = 0
    pnl: float = 0.0
    wins: int = 0

    @property
    def win_rate(self) -> float:
        return _ratio(self.wins, self.count) * 100.0


@dataclass
class BucketStats:
    """PnL total and trade count for one time bucket."""
    total_pnl: float = 0.0
    trades: int = 0

    @property
    def avg_pnl(self) -> float:
        return _ratio(self.total_pnl, self.trades)

    def add(self, pnl: float) -> None:
        self.total_pnl += pnl
        self.trades += 1


@dataclass
class VolumeBreakdown:
    total_volume: float = 0.0
    by_symbol: List[SymbolAmount] = field(default_factory=list)


def _closed_with_exit(trades: Iterable[Trade]) -> List[Trade]:
    return [t for t in trades if t.is_closed and t.exit_time is not None]


def _sorted_by_symbol(totals: Dict[str, float]) -> List[SymbolAmount]:
    rows = [SymbolAmount(symbol=s, amount=a) for s, a in totals.items()]
    return sorted(rows, key=lambda r: r.amount, reverse=True)


def _symbol_key(trade: Trade) -> str:
    return getattr(trade.symbol, "value", trade.symbol)


def order_type_breakdown(trades: Iterable[Trade]) -> Dict[OrderType, OrderTypeStats]:
    """Win/loss, PnL and fee totals per order type, closed trades only."""
    stats = {ot: OrderTypeStats() for ot in OrderType}
    for trade in trades:
        if not trade.is_closed:
            continue
        bucket = stats[trade.order_type]
        bucket.total_trades += 1
        bucket.total_pnl += trade.pnl
        bucket.total_fees += trade.fees
        if trade.pnl > 0:
            bucket.winning_trades += 1
        elif trade.pnl < 0:
            bucket.losing_trades += 1
    return stats


def fees_by_order_type(trades: Iterable[Trade]) -> Dict[OrderType, FeeShare]:
    """Fee total and share of all fees per order type. Open trades included."""
    totals = {ot: 0.0 for ot in OrderType}
    for trade in trades:
        totals[trade.order_type] += trade.fees
    grand_total = sum(totals.values())
    return {
        ot: FeeShare(value=value, percentage=_ratio(value, grand_total) * 100.0)
        for ot, value in totals.items()
    }


def fees_by_symbol(trades: Iterable[Trade]) -> List[SymbolAmount]:
    """Fee totals per symbol, largest first. Open trades included."""
    totals: Dict[str, float] = {}
    for trade in trades:
        key = _symbol_key(trade)
        totals[key] = totals.get(key, 0.0) + trade.fees
    return _sorted_by_symbol(totals)


def fee_summary(trades: Iterable[Trade]) -> FeeSummary:
    """Total, mean, highest and lowest per-trade fee."""
    fees = [t.fees for t in trades]
    if not fees:
        return FeeSummary()
    return FeeSummary(total=sum(fees), average=sum(fees) / len(fees), highest=max(fees), lowest=min(fees))


def volume_by_symbol(trades: Iterable[Trade]) -> VolumeBreakdown:
    """Notional at entry (quantity * entry price) per symbol, largest first. Open trades included."""
    totals: Dict[str, float] = {}
    total_volume = 0.0
    for trade in trades:
        volume = trade.quantity * trade.entry_price
        total_volume += volume
        key = _symbol_key(trade)
        totals[key] = totals.get(key, 0.0) + volume
    return VolumeBreakdown(total_volume=total_volume, by_symbol=_sorted_by_symbol(totals))


def direction_breakdown(trades: Iterable[Trade]) -> Dict[TradeDirection, DirectionStats]:
    """Count, PnL and wins per direction over trades with an exit price."""
    stats = {d: DirectionStats() for d in TradeDirection}
    for trade in trades:
        if trade.exit_price is None:
            continue
        bucket = stats[trade.direction]
        bucket.count += 1
        bucket.pnl += trade.pnl
        if trade.pnl > 0:
            bucket.wins += 1
    return stats


def hourly_breakdown(trades: Iterable[Trade]) -> Dict[int, BucketStats]:
    """24 buckets keyed 0-23 by exit hour."""
    buckets = {hour: BucketStats() for hour in range(24)}
    for trade in _closed_with_exit(trades):
        buckets[trade.exit_time.hour].add(trade.pnl)
    return buckets


def day_of_week(trade: Trade) -> int:
    """Exit weekday, 0 = Sunday."""
    return (trade.exit_time.weekday() + 1) % 7


def daily_breakdown(trades: Iterable[Trade]) -> Dict[int, BucketStats]:
    """7 buckets keyed 0-6 by exit weekday, Sunday first. See DAY_NAMES."""
    buckets = {day: BucketStats() for day in range(7)}
    for trade in _closed_with_exit(trades):
        buckets[day_of_week(trade)].add(trade.pnl)
    return buckets


def session_breakdown(trades: Iterable[Trade]) -> Dict[TradingSession, BucketStats]:
    buckets = {session: BucketStats() for session in TradingSession}
    for trade in _closed_with_exit(trades):
        buckets[TradingSession.for_hour(trade.exit_time.hour)].add(trade.pnl)
    return buckets
