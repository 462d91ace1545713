"""
Core data types for trades, filters, and derived chart records.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Union


class TradeDirection(str, Enum):
    LONG = "long"
    SHORT = "short"

    @property
    def sign(self) -> int:
        return 1 if self is TradeDirection.LONG else -1


class TradeStatus(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class OrderType(str, Enum):
    MARKET = "market"
    LIMIT = "limit"
    STOP = "stop"


class TradingSymbol(str, Enum):
    SOL_USDT = "SOL/USDT"
    BTC_USDT = "BTC/USDT"
    ETH_USDT = "ETH/USDT"
    BONK_USDT = "BONK/USDT"
    RAY_USDT = "RAY/USDT"


ALL_SYMBOLS = "all"

SymbolFilter = Union[TradingSymbol, str]


def parse_symbol_filter(value: Optional[str]) -> SymbolFilter:
    """'all' (any case, or empty) or a known trading pair. Raises ValueError otherwise."""
    text = (value or ALL_SYMBOLS).strip()
    if text.lower() == ALL_SYMBOLS:
        return ALL_SYMBOLS
    return TradingSymbol(text.upper())


@dataclass(frozen=True)
class Trade:
    """Single trade record. Open trades carry no exit price or exit time."""
    id: str
    symbol: TradingSymbol
    direction: TradeDirection
    order_type: OrderType
    entry_price: float
    quantity: float
    leverage: float
    entry_time: datetime
    pnl: float
    pnl_percentage: float
    fees: float
    status: TradeStatus
    exit_price: Optional[float] = None
    exit_time: Optional[datetime] = None
    notes: Optional[str] = None

    @property
    def is_closed(self) -> bool:
        return self.status == TradeStatus.CLOSED

    @property
    def notional(self) -> float:
        """Value at entry (entry price * quantity)."""
        return self.entry_price * self.quantity

    @property
    def price_pnl(self) -> Optional[float]:
        """PnL implied by the price move, None while the trade has no exit price."""
        if self.exit_price is None:
            return None
        return (self.exit_price - self.entry_price) * self.quantity * self.direction.sign

    @property
    def reference_time(self) -> datetime:
        """Exit time when present, else entry time. Used for date filtering."""
        return self.exit_time if self.exit_time is not None else self.entry_time


@dataclass(frozen=True)
class DateRange:
    start: Optional[datetime] = None
    end: Optional[datetime] = None


@dataclass(frozen=True)
class FilterOptions:
    """Active dashboard filter: symbol selector plus optional inclusive date bounds."""
    symbol: SymbolFilter = ALL_SYMBOLS
    date_range: DateRange = field(default_factory=DateRange)

    @property
    def is_active(self) -> bool:
        return (
            self.symbol != ALL_SYMBOLS
            or self.date_range.start is not None
            or self.date_range.end is not None
        )


@dataclass
class ChartDataPoint:
    """One closed trade on the PnL curve."""
    date: str
    pnl: float
    cumulative_pnl: float


@dataclass
class DrawdownPoint:
    date: str
    drawdown: float
    cumulative_pnl: float
