"""
Trade store: owns the trade collection and the active filter.
Updates apply immediately; readers get fresh lists, never the internal one.
"""

from __future__ import annotations
import logging
from dataclasses import replace
from datetime import datetime
from typing import Iterable, List, Optional

from trade_dashboard.core.types import ALL_SYMBOLS, DateRange, FilterOptions, SymbolFilter, Trade
from trade_dashboard.analytics.filters import filter_trades
from trade_dashboard.analytics.validation import find_inconsistencies

logger = logging.getLogger("trade_dashboard.store")


class TradeStore:
    """In-memory trades plus filter state."""

    def __init__(self, trades: Optional[Iterable[Trade]] = None, filters: Optional[FilterOptions] = None):
        self._trades: List[Trade] = []
        self._filters = filters or FilterOptions()
        if trades is not None:
            self.set_trades(trades)

    @property
    def filters(self) -> FilterOptions:
        return self._filters

    def snapshot(self) -> List[Trade]:
        """Copy of the full collection."""
        return list(self._trades)

    def set_trades(self, trades: Iterable[Trade]) -> None:
        self._trades = list(trades)
        issues = find_inconsistencies(self._trades)
        logger.info("Loaded %d trades (%d issues)", len(self._trades), len(issues))

    def add_trade(self, trade: Trade) -> None:
        if any(t.id == trade.id for t in self._trades):
            raise ValueError(f"Duplicate trade id: {trade.id}")
        find_inconsistencies([trade])
        self._trades = self._trades + [trade]

    def update_trade(self, trade_id: str, **updates) -> Trade:
        """Replace fields of one trade (e.g. notes). Raises KeyError for an unknown id."""
        for i, trade in enumerate(self._trades):
            if trade.id == trade_id:
                updated = replace(trade, **updates)
                find_inconsistencies([updated])
                self._trades = self._trades[:i] + [updated] + self._trades[i + 1:]
                logger.debug("Updated trade %s: %s", trade_id, sorted(updates))
                return updated
        raise KeyError(trade_id)

    def delete_trade(self, trade_id: str) -> None:
        remaining = [t for t in self._trades if t.id != trade_id]
        if len(remaining) == len(self._trades):
            raise KeyError(trade_id)
        self._trades = remaining

    def set_symbol_filter(self, symbol: SymbolFilter) -> None:
        self._filters = replace(self._filters, symbol=symbol)

    def set_date_range_filter(self, start: Optional[datetime], end: Optional[datetime]) -> None:
        self._filters = replace(self._filters, date_range=DateRange(start=start, end=end))

    def reset_filters(self) -> None:
        self._filters = FilterOptions(symbol=ALL_SYMBOLS)

    def filtered_trades(self) -> List[Trade]:
        return filter_trades(self._trades, self._filters)
