from __future__ import annotations

import logging
import os
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .formatter import ConsoleFormatter, JSONFormatter
from .levels import register_levels, to_level

_listener: QueueListener | None = None

# Handlers are installed on the package logger only, never on the root logger.
PACKAGE_LOGGER = "pubg_api"


def bootstrap_logging(
    *,
    service: str = "pubg-api",
    level: str | int | None = None,
    console: Optional[bool] = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "pubg-api.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> logging.Logger:
    """Install console and/or rotating JSONL handlers on the package logger.

    ``console`` defaults to the ``LOG_CONSOLE`` environment variable. File
    records go through a QueueHandler/QueueListener pair.
    Calling this again replaces the handlers installed by the previous call.
    """
    global _listener
    shutdown_logging()
    register_levels()

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    logger.setLevel(lvl)

    if console is None:
        console = os.getenv("LOG_CONSOLE", "false").strip().lower() == "true"
    if console:
        stream = logging.StreamHandler()
        console_level = os.getenv("LOG_CONSOLE_LEVEL", "")
        stream.setLevel(to_level(console_level) if console_level else lvl)
        stream.setFormatter(ConsoleFormatter())
        logger.addHandler(stream)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(
            str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        logger.addHandler(QueueHandler(q))
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    logger.debug("logging configured for %s", service)
    return logger


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        for handler in _listener.handlers:
            handler.close()
        _listener = None
