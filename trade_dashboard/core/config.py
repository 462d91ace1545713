"""
Load configuration from config.yaml and .env. Env values win over the file.
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from trade_dashboard.core.types import ALL_SYMBOLS, SymbolFilter, parse_symbol_filter


def _env_path(project_root: Optional[Path] = None) -> Path:
    root = project_root or Path(__file__).resolve().parents[2]
    return root / ".env"


def load_dotenv_if_exists(project_root: Optional[Path] = None) -> None:
    """Load .env from project root if present."""
    path = _env_path(project_root)
    if path.exists():
        load_dotenv(path)


def load_config(config_path: Optional[Path] = None, project_root: Optional[Path] = None) -> "Config":
    """Load config.yaml and overlay with env. Returns Config."""
    load_dotenv_if_exists(project_root)
    root = project_root or Path(__file__).resolve().parents[2]
    path = config_path or root / "config.yaml"
    data: dict[str, Any] = {}
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    def env(key: str, default: str = "") -> str:
        return os.getenv(key, default).strip()

    def env_float(key: str, default: float = 0.0) -> float:
        try:
            return float(os.getenv(key, str(default)))
        except ValueError:
            return default

    dashboard = data.get("dashboard", {})
    risk = data.get("risk", {})
    logging_cfg = data.get("logging", {})

    trades_file = env("TRADES_FILE", str(dashboard.get("trades_file", "")))
    return Config(
        trades_file=Path(trades_file) if trades_file else None,
        default_symbol=parse_symbol_filter(env("SYMBOL", str(dashboard.get("default_symbol", ALL_SYMBOLS)))),
        # Risk bands for max drawdown (absolute percent)
        drawdown_medium_pct=env_float("DRAWDOWN_MEDIUM_PCT", float(risk.get("drawdown_medium_pct", 10.0))),
        drawdown_high_pct=env_float("DRAWDOWN_HIGH_PCT", float(risk.get("drawdown_high_pct", 20.0))),
        log_level=env("LOG_LEVEL", logging_cfg.get("level", "INFO")),
        log_dir=Path(logging_cfg.get("log_dir", "logs")),
        log_file=logging_cfg.get("log_file", "trade_dashboard.log"),
    )


class Config:
    """Unified configuration. Immutable after load."""

    __slots__ = (
        "trades_file", "default_symbol",
        "drawdown_medium_pct", "drawdown_high_pct",
        "log_level", "log_dir", "log_file",
    )

    def __init__(
        self,
        trades_file: Optional[Path] = None,
        default_symbol: SymbolFilter = ALL_SYMBOLS,
        drawdown_medium_pct: float = 10.0,
        drawdown_high_pct: float = 20.0,
        log_level: str = "INFO",
        log_dir: Path = None,
        log_file: str = "trade_dashboard.log",
    ):
        self.trades_file = trades_file
        self.default_symbol = default_symbol
        self.drawdown_medium_pct = drawdown_medium_pct
        self.drawdown_high_pct = drawdown_high_pct
        self.log_level = log_level
        self.log_dir = Path(log_dir) if log_dir else Path("logs")
        self.log_file = log_file
