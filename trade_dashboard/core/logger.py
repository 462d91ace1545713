"""
Logging for the dashboard: one package logger, console plus optional file.
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import IO, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from trade_dashboard.core.config import Config

PACKAGE_LOGGER = "trade_dashboard"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _file_handler(log_dir: Path, log_file: str, formatter: logging.Formatter) -> logging.Handler:
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_dir / log_file, encoding="utf-8")
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: str = "INFO",
    log_dir: Optional[Path] = None,
    log_file: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    (Re)configure the package logger. Previous handlers are closed and replaced,
    so repeated calls never duplicate output.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    console = logging.StreamHandler(stream or sys.stdout)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_dir and log_file:
        logger.addHandler(_file_handler(log_dir, log_file, formatter))
    return logger


def setup_logging_from_config(config: "Config", stream: Optional[IO[str]] = None) -> logging.Logger:
    return setup_logging(config.log_level, config.log_dir, config.log_file, stream)
