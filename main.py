#!/usr/bin/env python3
"""
Trade Dashboard CLI: summary | trades
Usage:
  python main.py summary [--config config.yaml] [--trades trades.csv] [--symbol SOL/USDT] [--start 2024-01-01] [--end 2024-01-31]
  python main.py trades  [--config config.yaml] [--trades trades.csv] [--symbol all]
"""

from __future__ import annotations
import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

# Project root
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from trade_dashboard.core.config import load_config, Config
from trade_dashboard.core.logger import setup_logging_from_config
from trade_dashboard.core.types import parse_symbol_filter
from trade_dashboard.data.loader import load_trades, parse_timestamp, trades_to_frame
from trade_dashboard.store import TradeStore
from trade_dashboard.analytics.report import build_report
from trade_dashboard.analytics.breakdowns import DAY_NAMES
from trade_dashboard.utils.formatting import format_currency, format_duration, format_percentage

logger = logging.getLogger("trade_dashboard")


def _parse_date(value: Optional[str]) -> Optional[datetime]:
    return parse_timestamp(value) if value else None


def _load_store(config: Config, args: argparse.Namespace) -> Optional[TradeStore]:
    path = args.trades or config.trades_file
    if path is None or not Path(path).exists():
        logger.error("Trade file not found: %s (set --trades or TRADES_FILE)", path)
        return None
    store = TradeStore(load_trades(Path(path)))
    symbol = parse_symbol_filter(args.symbol) if args.symbol else config.default_symbol
    store.set_symbol_filter(symbol)
    store.set_date_range_filter(_parse_date(args.start), _parse_date(args.end))
    return store


def run_summary(config: Config, args: argparse.Namespace) -> int:
    """Print the statistics bundle and breakdowns for the active filter."""
    store = _load_store(config, args)
    if store is None:
        return 1
    r = build_report(store.snapshot(), store.filters, config.drawdown_medium_pct, config.drawdown_high_pct)
    s = r.stats
    print("\n--- Trading Summary ---")
    print(f"Trades: {s.total_trades} closed of {len(r.trades)} (wins: {s.winning_trades}, losses: {s.losing_trades})")
    print(f"Total PnL: {format_currency(s.total_pnl)}")
    print(f"Volume: {format_currency(s.total_volume)} | Fees: {format_currency(s.total_fees)}")
    print(f"Win rate: {format_percentage(s.win_rate)}")
    print(f"Avg win: {format_currency(s.average_win)} | Avg loss: {format_currency(s.average_loss)}")
    print(f"Largest win: {format_currency(s.largest_win)} | Largest loss: {format_currency(s.largest_loss)}")
    print(f"Avg duration: {format_duration(s.average_trade_duration * 3600 * 1000)}")
    print(f"Long/short: {s.long_trades}/{s.short_trades} (ratio {s.long_short_ratio:.2f})")
    print(f"Max drawdown: {format_percentage(r.max_drawdown)} ({r.risk_level.value} risk)")

    print("\n--- Order Types ---")
    for order_type, ot in r.order_types.items():
        fee = r.fees_by_order_type[order_type]
        print(
            f"{order_type.value:<7} trades={ot.total_trades:<4} avg={format_currency(ot.avg_pnl)} "
            f"win={format_percentage(ot.win_rate)} fees={format_currency(fee.value)} ({format_percentage(fee.percentage)})"
        )
    print("\n--- Directions ---")
    for direction, d in r.directions.items():
        print(f"{direction.value:<5} trades={d.count:<4} pnl={format_currency(d.pnl)} win={format_percentage(d.win_rate)}")
    print("\n--- Sessions ---")
    for session, b in r.sessions.items():
        print(f"{session.value:<8} {session.label} trades={b.trades:<4} avg={format_currency(b.avg_pnl)}")
    print("\n--- Weekdays ---")
    for day, b in r.daily.items():
        print(f"{DAY_NAMES[day]:<9} trades={b.trades:<4} total={format_currency(b.total_pnl)}")
    print("\n--- Volume by Symbol ---")
    for row in r.volume.by_symbol:
        print(f"{row.symbol:<10} {format_currency(row.amount)}")
    return 0


def run_trades(config: Config, args: argparse.Namespace) -> int:
    """Print the filtered trade table."""
    store = _load_store(config, args)
    if store is None:
        return 1
    frame = trades_to_frame(store.filtered_trades())
    print(frame.to_string(index=False) if not frame.empty else "No trades match the filter.")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Trade Dashboard CLI")
    parser.add_argument("mode", choices=["summary", "trades"], help="Show statistics or the trade table")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.yaml")
    parser.add_argument("--trades", type=Path, default=None, help="Trade file (.csv or .json)")
    parser.add_argument("--symbol", default=None, help="'all' or a pair such as SOL/USDT")
    parser.add_argument("--start", default=None, help="Inclusive start date/time")
    parser.add_argument("--end", default=None, help="Inclusive end date/time")
    args = parser.parse_args()
    config = load_config(args.config, ROOT)
    setup_logging_from_config(config)
    if args.mode == "summary":
        return run_summary(config, args)
    return run_trades(config, args)


if __name__ == "__main__":
    exit(main())
