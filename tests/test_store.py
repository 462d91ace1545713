"""Unit tests for store.TradeStore."""

import logging
from datetime import datetime

import pytest

from trade_dashboard.core.types import ALL_SYMBOLS, TradeStatus, TradingSymbol
from trade_dashboard.store import TradeStore


def test_filters_apply_immediately(make_trade):
    sol = make_trade(pnl=1, symbol=TradingSymbol.SOL_USDT, exit_time=datetime(2024, 1, 1, 12))
    eth = make_trade(pnl=1, symbol=TradingSymbol.ETH_USDT, exit_time=datetime(2024, 1, 5, 12))
    store = TradeStore([sol, eth])
    store.set_symbol_filter(TradingSymbol.ETH_USDT)
    assert store.filtered_trades() == [eth]
    store.set_symbol_filter(ALL_SYMBOLS)
    store.set_date_range_filter(None, datetime(2024, 1, 2))
    assert store.filtered_trades() == [sol]
    store.reset_filters()
    assert store.filters.is_active is False
    assert store.filtered_trades() == [sol, eth]


def test_update_notes_returns_new_trade(make_trade):
    original = make_trade(pnl=1, trade_id="a")
    store = TradeStore([original])
    before = store.snapshot()
    updated = store.update_trade("a", notes="held through news")
    assert updated.notes == "held through news"
    assert original.notes is None
    assert before[0].notes is None
    assert store.snapshot()[0].notes == "held through news"


def test_update_unknown_id(make_trade):
    store = TradeStore([make_trade(trade_id="a")])
    with pytest.raises(KeyError):
        store.update_trade("missing", notes="x")


def test_add_and_delete(make_trade):
    store = TradeStore()
    store.add_trade(make_trade(trade_id="a"))
    store.add_trade(make_trade(trade_id="b"))
    with pytest.raises(ValueError):
        store.add_trade(make_trade(trade_id="a"))
    store.delete_trade("a")
    assert [t.id for t in store.snapshot()] == ["b"]
    with pytest.raises(KeyError):
        store.delete_trade("a")


def test_snapshot_is_a_copy(make_trade):
    store = TradeStore([make_trade()])
    snap = store.snapshot()
    snap.clear()
    assert len(store.snapshot()) == 1


def test_update_checks_the_new_trade(make_trade, caplog):
    store = TradeStore([make_trade(exit_time=None, trade_id="o1")])
    with caplog.at_level(logging.WARNING, logger="trade_dashboard"):
        updated = store.update_trade("o1", status=TradeStatus.CLOSED)
    assert updated.status == TradeStatus.CLOSED
    assert "closed trade has no exit price" in caplog.text
    assert "closed trade has no exit time" in caplog.text
