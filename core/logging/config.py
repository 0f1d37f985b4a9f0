from __future__ import annotations

import logging
import os
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .formatter import ConsoleFormatter, JSONFormatter
from .levels import register_levels, to_level

_listener: QueueListener | None = None


def bootstrap_logging(
    *,
    service: str = "dns-check",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "dns-check.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 3,
) -> None:
    """Configure the root logger for one check run.

    Console output goes to stderr (JSON lines when ``LOG_CONSOLE`` is ``json``,
    human readable otherwise). When ``log_dir`` is given a
    rotating JSON file is also written through a queue listener.
    """
    global _listener
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(lvl)
    style = os.getenv("LOG_CONSOLE", "pretty").strip().lower()
    if style == "json":
        console.setFormatter(JSONFormatter())
    else:
        console.setFormatter(ConsoleFormatter(color=sys.stderr.isatty()))
    root.addHandler(console)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count)
        file_handler.setLevel(lvl)
        file_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        root.addHandler(QueueHandler(q))
        _listener = QueueListener(q, file_handler, respect_handler_level=True)
        _listener.start()

    # httpx logs every request at INFO; keep it out of the check output
    logging.getLogger("httpx").setLevel(max(lvl, logging.WARNING))
    logging.getLogger(service).debug("logging configured", extra={"service": service})


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
