"""
Cumulative PnL curve and peak-relative drawdown.
Drawdown is in percent of the running peak and is never positive.
"""

from __future__ import annotations
from datetime import datetime
from enum import Enum
from typing import Iterable, List

import numpy as np

from trade_dashboard.core.types import ChartDataPoint, DrawdownPoint, Trade


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


def date_label(when: datetime) -> str:
    """Short calendar date, e.g. 1/2/2024."""
    return f"{when.month}/{when.day}/{when.year}"


def prepare_chart_data(trades: Iterable[Trade]) -> List[ChartDataPoint]:
    """
    Closed trades with an exit time, oldest exit first, with running cumulative PnL.
    Ties on exit time keep their input order.
    """
    ordered = sorted(
        (t for t in trades if t.is_closed and t.exit_time is not None),
        key=lambda t: t.exit_time,
    )
    points: List[ChartDataPoint] = []
    cumulative = 0.0
    for trade in ordered:
        cumulative += trade.pnl
        points.append(ChartDataPoint(date=date_label(trade.exit_time), pnl=trade.pnl, cumulative_pnl=cumulative))
    return points


def drawdown_pct(cumulative_pnls: List[float]) -> List[float]:
    """Per-point drawdown vs running peak, in percent of |peak|. 0 where the peak is 0."""
    if not cumulative_pnls:
        return []
    arr = np.array(cumulative_pnls, dtype=float)
    peak = np.maximum.accumulate(arr)
    nonzero = peak != 0
    dd = (arr - peak) / np.where(nonzero, np.abs(peak), 1.0) * 100.0
    return np.where(nonzero, dd, 0.0).tolist()


def drawdown_series(points: List[ChartDataPoint]) -> List[DrawdownPoint]:
    dd = drawdown_pct([p.cumulative_pnl for p in points])
    return [
        DrawdownPoint(date=p.date, drawdown=d, cumulative_pnl=p.cumulative_pnl)
        for p, d in zip(points, dd)
    ]


def max_drawdown(cumulative_pnls: List[float]) -> float:
    """Most negative drawdown in percent (e.g. -16.7). 0 for an empty curve."""
    dd = drawdown_pct(cumulative_pnls)
    if not dd:
        return 0.0
    return float(min(dd))


def max_drawdown_from_trades(trades: Iterable[Trade]) -> float:
    return max_drawdown([p.cumulative_pnl for p in prepare_chart_data(trades)])


def risk_level(max_dd: float, medium_pct: float = 10.0, high_pct: float = 20.0) -> RiskLevel:
    """Classify |max drawdown|: below medium_pct Low, below high_pct Medium, else High."""
    magnitude = abs(max_dd)
    if magnitude < medium_pct:
        return RiskLevel.LOW
    if magnitude < high_pct:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH
