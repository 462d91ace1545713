"""Shared fixtures: trade factory."""

from datetime import datetime

import pytest

from trade_dashboard.core.types import OrderType, Trade, TradeDirection, TradeStatus, TradingSymbol


@pytest.fixture
def make_trade():
    """Build a Trade; closed by default unless exit_time=None is passed."""
    counter = {"n": 0}

    def _make(
        pnl=0.0,
        symbol=TradingSymbol.SOL_USDT,
        direction=TradeDirection.LONG,
        order_type=OrderType.MARKET,
        entry_price=100.0,
        exit_price=101.0,
        quantity=1.0,
        entry_time=datetime(2024, 1, 1, 9, 0),
        exit_time=datetime(2024, 1, 1, 10, 0),
        fees=0.0,
        status=None,
        trade_id=None,
        notes=None,
    ):
        counter["n"] += 1
        if status is None:
            status = TradeStatus.CLOSED if exit_time is not None else TradeStatus.OPEN
        if status == TradeStatus.OPEN and exit_time is None:
            exit_price = None
        return Trade(
            id=trade_id or f"t{counter['n']}",
            symbol=symbol,
            direction=direction,
            order_type=order_type,
            entry_price=entry_price,
            quantity=quantity,
            leverage=1.0,
            entry_time=entry_time,
            pnl=pnl,
            pnl_percentage=0.0,
            fees=fees,
            status=status,
            exit_price=exit_price,
            exit_time=exit_time,
            notes=notes,
        )

    return _make
