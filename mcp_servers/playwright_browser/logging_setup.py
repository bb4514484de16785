"""Process-wide log sink: one file per day under the log directory."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "log_.log"

_handler: logging.Handler | None = None


def configure_logging(log_dir: str, level: str = "DEBUG") -> Path:
    """Attach a midnight-rotating file handler to the root logger.

    Stdout carries the MCP stdio transport, so nothing is logged to it.
    Returns the active log file path.
    """
    global _handler

    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    log_path = directory / LOG_FILE_NAME

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
        _handler.close()

    handler = logging.handlers.TimedRotatingFileHandler(log_path, when="midnight", encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.DEBUG))
    _handler = handler
    return log_path
