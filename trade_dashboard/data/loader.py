"""
Trade source: read trades from CSV/JSON and render them as a table.
Accepts camelCase (entryPrice) or snake_case (entry_price) column names.
"""

from __future__ import annotations
import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional

import pandas as pd

from trade_dashboard.core.types import (
    OrderType,
    Trade,
    TradeDirection,
    TradeStatus,
    TradingSymbol,
)

logger = logging.getLogger("trade_dashboard.data.loader")

OPEN_LABEL = "Open"

EXPORT_COLUMNS = [
    "ID", "Symbol", "Direction", "Order Type", "Entry Price", "Exit Price",
    "Quantity", "Leverage", "Entry Time", "Exit Time",
    "PnL ($)", "PnL (%)", "Fees ($)", "Status", "Notes",
]


# Table headers written by trades_to_frame, read back as field names
_HEADER_FIELDS = {
    "ID": "id",
    "Symbol": "symbol",
    "Direction": "direction",
    "Order Type": "order_type",
    "Entry Price": "entry_price",
    "Exit Price": "exit_price",
    "Quantity": "quantity",
    "Leverage": "leverage",
    "Entry Time": "entry_time",
    "Exit Time": "exit_time",
    "PnL ($)": "pnl",
    "PnL (%)": "pnl_percentage",
    "Fees ($)": "fees",
    "Status": "status",
    "Notes": "notes",
}


def _snake(key: str) -> str:
    key = key.strip()
    if key in _HEADER_FIELDS:
        return _HEADER_FIELDS[key]
    if key.isupper():
        return key.lower()
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


def _missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == "" or value.strip() == OPEN_LABEL
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _optional_float(value: Any) -> Optional[float]:
    return None if _missing(value) else float(value)


def parse_timestamp(value: Any) -> datetime:
    """Naive datetime; offset-aware input (e.g. '...Z') is converted to UTC first."""
    ts = pd.Timestamp(value)
    if ts.tzinfo is not None:
        ts = ts.tz_convert(None)
    return ts.to_pydatetime()


def _optional_time(value: Any) -> Optional[datetime]:
    if _missing(value):
        return None
    return parse_timestamp(value)


def trade_from_record(record: Mapping[str, Any]) -> Trade:
    """Build a Trade from one row/object. Raises ValueError on unknown enum values or missing fields."""
    row = {_snake(str(k)): v for k, v in record.items()}
    try:
        exit_price = _optional_float(row.get("exit_price"))
        exit_time = _optional_time(row.get("exit_time"))
        status_raw = row.get("status")
        if _missing(status_raw):
            status = TradeStatus.CLOSED if exit_price is not None and exit_time is not None else TradeStatus.OPEN
        else:
            status = TradeStatus(str(status_raw).strip().lower())
        notes = row.get("notes")
        return Trade(
            id=str(row["id"]),
            symbol=TradingSymbol(str(row["symbol"]).strip().upper()),
            direction=TradeDirection(str(row["direction"]).strip().lower()),
            order_type=OrderType(str(row["order_type"]).strip().lower()),
            entry_price=float(row["entry_price"]),
            quantity=float(row["quantity"]),
            leverage=_optional_float(row.get("leverage")) or 1.0,
            entry_time=parse_timestamp(row["entry_time"]),
            pnl=_optional_float(row.get("pnl")) or 0.0,
            pnl_percentage=_optional_float(row.get("pnl_percentage")) or 0.0,
            fees=_optional_float(row.get("fees")) or 0.0,
            status=status,
            exit_price=exit_price,
            exit_time=exit_time,
            notes=None if _missing(notes) else str(notes),
        )
    except KeyError as e:
        raise ValueError(f"Trade record missing field: {e.args[0]}") from e


def load_trades(path: Path) -> List[Trade]:
    """Read a .csv or .json (list of objects) trade file."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        df = pd.read_csv(path, dtype=str)
    elif suffix == ".json":
        df = pd.read_json(path, orient="records", dtype=False, convert_dates=False)
    else:
        raise ValueError(f"Unsupported trade file type: {path.suffix}")
    trades = [trade_from_record(rec) for rec in df.to_dict(orient="records")]
    logger.info("Read %d trades from %s", len(trades), path)
    return trades


def trades_to_frame(trades: Iterable[Trade]) -> pd.DataFrame:
    """One row per trade, open exits shown as 'Open'."""
    rows = []
    for t in trades:
        rows.append({
            "ID": t.id,
            "Symbol": t.symbol.value,
            "Direction": t.direction.value,
            "Order Type": t.order_type.value,
            "Entry Price": t.entry_price,
            "Exit Price": t.exit_price if t.exit_price is not None else OPEN_LABEL,
            "Quantity": t.quantity,
            "Leverage": t.leverage,
            "Entry Time": t.entry_time,
            "Exit Time": t.exit_time if t.exit_time is not None else OPEN_LABEL,
            "PnL ($)": round(t.pnl, 2),
            "PnL (%)": round(t.pnl_percentage, 2),
            "Fees ($)": round(t.fees, 2),
            "Status": t.status.value,
            "Notes": t.notes or "",
        })
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)
