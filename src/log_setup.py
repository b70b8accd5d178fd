"""File logging for the clock; the terminal itself belongs to the display."""

from __future__ import annotations

import logging
from pathlib import Path

from src.config import LoggingConfig

LOG_FILENAME = "clock.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(config: LoggingConfig) -> Path:
    """Route root logger output to <log_dir>/clock.log and return that path."""
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.level}")

    log_dir = Path(config.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / LOG_FILENAME

    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
        existing.close()
    root.addHandler(handler)
    root.setLevel(level)
    return log_path


__all__ = ["LOG_FILENAME", "configure_logging"]
