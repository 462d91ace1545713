"""
Consistency checks on incoming trades. Problems are reported and logged,
never raised; aggregators skip what they cannot use.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, List

from trade_dashboard.core.types import Trade, TradeStatus

logger = logging.getLogger("trade_dashboard.analytics.validation")

# Absolute PnL gap allowed on top of fees before stored pnl and price pnl disagree.
DEFAULT_PNL_TOLERANCE = 0.01

@dataclass
class TradeIssue:
    trade_id: str
    message: str


def check_trade(trade: Trade, pnl_tolerance: float = DEFAULT_PNL_TOLERANCE, net_of_fees: bool = True) -> List[str]:
    """Return human-readable problems with one trade (empty when consistent)."""
    problems: List[str] = []
    if trade.status == TradeStatus.CLOSED:
        if trade.exit_price is None:
            problems.append("closed trade has no exit price")
        if trade.exit_time is None:
            problems.append("closed trade has no exit time")
    elif trade.exit_price is not None or trade.exit_time is not None:
        problems.append("open trade carries exit fields")

    if trade.exit_time is not None and trade.exit_time < trade.entry_time:
        problems.append("exit time precedes entry time")

    price_pnl = trade.price_pnl
    if trade.is_closed and price_pnl is not None:
        # Stored pnl may already have fees taken out
        allowance = trade.fees if net_of_fees else 0.0
        gap = abs(trade.pnl - price_pnl)
        if gap > allowance + pnl_tolerance:
            problems.append(f"stored pnl {trade.pnl:.4f} differs from price pnl {price_pnl:.4f}")
    return problems


def find_inconsistencies(
    trades: Iterable[Trade],
    pnl_tolerance: float = DEFAULT_PNL_TOLERANCE,
    net_of_fees: bool = True,
) -> List[TradeIssue]:
    """Check every trade and log each problem as a warning."""
    issues: List[TradeIssue] = []
    for trade in trades:
        for message in check_trade(trade, pnl_tolerance, net_of_fees):
            logger.warning("Trade %s: %s", trade.id, message)
            issues.append(TradeIssue(trade_id=trade.id, message=message))
    return issues
