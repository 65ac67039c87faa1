"""Send oktetoconfig log records to stderr or a file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _level_from(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {name.upper()}")
    return level


def _handler_for(log_file: str | None) -> logging.Handler:
    if not log_file:
        return logging.StreamHandler()
    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path)


def configure_logging(log_level: str | None = None, log_file: str | None = None) -> None:
    """Route the package's records through a single handler.

    ``log_level`` falls back to ``OKTETO_LOG_LEVEL`` and then WARNING. Records
    go to ``log_file`` when given, otherwise to stderr, and stop there instead
    of reaching the root logger.
    """
    level = _level_from(log_level or os.getenv("OKTETO_LOG_LEVEL") or "WARNING")

    handler = _handler_for(log_file)
    handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))

    package_logger = logging.getLogger("oktetoconfig")
    package_logger.setLevel(level)
    package_logger.propagate = False
    package_logger.handlers = [handler]
