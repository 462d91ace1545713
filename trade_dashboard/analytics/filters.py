"""Symbol and date-range filtering of the trade collection."""

from __future__ import annotations
import logging
from typing import Iterable, List

from trade_dashboard.core.types import ALL_SYMBOLS, FilterOptions, Trade

logger = logging.getLogger("trade_dashboard.analytics.filters")


def matches_symbol(trade: Trade, filters: FilterOptions) -> bool:
    return filters.symbol == ALL_SYMBOLS or trade.symbol == filters.symbol


def matches_date_range(trade: Trade, filters: FilterOptions) -> bool:
    """Inclusive on both ends; a missing bound is unbounded."""
    start, end = filters.date_range.start, filters.date_range.end
    when = trade.reference_time
    if start is not None and when < start:
        return False
    if end is not None and when > end:
        return False
    return True


def filter_trades(trades: Iterable[Trade], filters: FilterOptions) -> List[Trade]:
    """Return the trades passing the filter, in their original order."""
    trades = list(trades)
    result = [t for t in trades if matches_symbol(t, filters) and matches_date_range(t, filters)]
    logger.debug("Filter %s kept %d/%d trades", filters, len(result), len(trades))
    return result
