"""Unit tests for analytics.breakdowns."""

from datetime import datetime

import pytest

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
from trade_dashboard.core.types import OrderType, TradeDirection, TradingSymbol


def test_fixed_bucket_counts_on_empty_input():
    assert len(hourly_breakdown([])) == 24
    assert len(daily_breakdown([])) == 7
    assert len(session_breakdown([])) == 3
    assert set(order_type_breakdown([])) == set(OrderType)
    assert set(direction_breakdown([])) == set(TradeDirection)
    assert all(b.avg_pnl == 0 for b in hourly_breakdown([]).values())


def test_order_type_breakdown_closed_only(make_trade):
    trades = [
        make_trade(pnl=10, order_type=OrderType.MARKET, fees=1),
        make_trade(pnl=-4, order_type=OrderType.MARKET, fees=1),
        make_trade(pnl=0, order_type=OrderType.MARKET, fees=1),
        make_trade(pnl=6, order_type=OrderType.LIMIT, fees=2),
        make_trade(pnl=100, order_type=OrderType.STOP, exit_time=None),
    ]
    stats = order_type_breakdown(trades)
    market = stats[OrderType.MARKET]
    assert (market.total_trades, market.winning_trades, market.losing_trades) == (3, 1, 1)
    assert market.total_pnl == 6
    assert market.total_fees == 3
    assert market.avg_pnl == pytest.approx(2)
    assert market.win_rate == pytest.approx(100 / 3)
    assert stats[OrderType.LIMIT].win_rate == 100
    assert stats[OrderType.STOP].total_trades == 0
    assert stats[OrderType.STOP].avg_pnl == 0
    assert stats[OrderType.STOP].win_rate == 0


def test_fees_by_order_type_scenario(make_trade):
    trades = [
        make_trade(order_type=OrderType.MARKET, fees=5),
        make_trade(order_type=OrderType.MARKET, fees=3),
        make_trade(order_type=OrderType.LIMIT, fees=2),
    ]
    shares = fees_by_order_type(trades)
    assert shares[OrderType.MARKET].value == 8
    assert shares[OrderType.MARKET].percentage == pytest.approx(80)
    assert shares[OrderType.LIMIT].percentage == pytest.approx(20)
    assert shares[OrderType.STOP].value == 0
    assert shares[OrderType.STOP].percentage == 0


def test_fees_by_order_type_no_fees(make_trade):
    shares = fees_by_order_type([make_trade(fees=0)])
    assert all(s.percentage == 0 for s in shares.values())


def test_fees_and_volume_by_symbol_include_open_trades(make_trade):
    trades = [
        make_trade(symbol=TradingSymbol.SOL_USDT, fees=1, entry_price=10, quantity=1),
        make_trade(symbol=TradingSymbol.BTC_USDT, fees=4, entry_price=100, quantity=2, exit_time=None),
        make_trade(symbol=TradingSymbol.SOL_USDT, fees=2, entry_price=10, quantity=3),
    ]
    fees = fees_by_symbol(trades)
    assert [(r.symbol, r.amount) for r in fees] == [("BTC/USDT", 4), ("SOL/USDT", 3)]
    volume = volume_by_symbol(trades)
    assert volume.total_volume == 240
    assert [(r.symbol, r.amount) for r in volume.by_symbol] == [("BTC/USDT", 200), ("SOL/USDT", 40)]


def test_fee_summary(make_trade):
    assert fee_summary([]).average == 0
    summary = fee_summary([make_trade(fees=1), make_trade(fees=5), make_trade(fees=3)])
    assert (summary.total, summary.average, summary.highest, summary.lowest) == (9, 3, 5, 1)


def test_direction_breakdown_uses_stored_pnl(make_trade):
    trades = [
        # stored pnl is net of fees, price move alone would say +10
        make_trade(pnl=8, direction=TradeDirection.LONG, entry_price=100, exit_price=110),
        make_trade(pnl=-3, direction=TradeDirection.LONG),
        make_trade(pnl=5, direction=TradeDirection.SHORT, entry_price=100, exit_price=95),
        make_trade(pnl=50, direction=TradeDirection.SHORT, exit_time=None),
    ]
    stats = direction_breakdown(trades)
    assert stats[TradeDirection.LONG].count == 2
    assert stats[TradeDirection.LONG].pnl == 5
    assert stats[TradeDirection.LONG].win_rate == 50
    assert stats[TradeDirection.SHORT].count == 1
    assert stats[TradeDirection.SHORT].win_rate == 100


def test_hourly_and_session(make_trade):
    trades = [
        make_trade(pnl=10, exit_time=datetime(2024, 1, 1, 3, 15)),
        make_trade(pnl=20, exit_time=datetime(2024, 1, 1, 3, 45)),
        make_trade(pnl=-6, exit_time=datetime(2024, 1, 1, 8, 0)),
        make_trade(pnl=4, exit_time=datetime(2024, 1, 1, 23, 59)),
        make_trade(pnl=99, exit_time=None),
    ]
    hourly = hourly_breakdown(trades)
    assert hourly[3].trades == 2
    assert hourly[3].avg_pnl == 15
    assert hourly[8].total_pnl == -6
    assert sum(b.trades for b in hourly.values()) == 4

    sessions = session_breakdown(trades)
    assert sessions[TradingSession.ASIAN].total_pnl == 30
    assert sessions[TradingSession.EUROPEAN].trades == 1
    assert sessions[TradingSession.AMERICAN].avg_pnl == 4


def test_daily_breakdown_sunday_first(make_trade):
    # 2024-01-07 is a Sunday, 2024-01-06 a Saturday
    trades = [
        make_trade(pnl=5, exit_time=datetime(2024, 1, 7, 12)),
        make_trade(pnl=-2, exit_time=datetime(2024, 1, 6, 12)),
        make_trade(pnl=1, exit_time=datetime(2024, 1, 8, 12)),
    ]
    daily = daily_breakdown(trades)
    assert daily[0].total_pnl == 5
    assert daily[6].total_pnl == -2
    assert daily[1].trades == 1


def test_session_helpers():
    assert TradingSession.for_hour(0) == TradingSession.ASIAN
    assert TradingSession.for_hour(15) == TradingSession.EUROPEAN
    assert TradingSession.for_hour(16) == TradingSession.AMERICAN
    assert TradingSession.AMERICAN.label == "16:00-00:00"
    with pytest.raises(ValueError):
        TradingSession.for_hour(24)
