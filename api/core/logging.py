"""
Process-wide logging setup.

Messages use an event style: `"category_created category_id=%s user_id=%s"`.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_configured = False


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def log_dir() -> Path | None:
    raw = os.environ.get("LOG_DIR", "").strip()
    if not raw:
        return None
    return Path(raw)


def configure_logging() -> None:
    global _configured
    if _configured:
        return None

    root = logging.getLogger()

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    # Optional file output: everything in combined.log, errors also in error.log.
    directory = log_dir()
    if directory is not None:
        directory.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(directory / "combined.log", encoding="utf-8"))
        error_handler = logging.FileHandler(directory / "error.log", encoding="utf-8")
        error_handler.setLevel(logging.ERROR)
        handlers.append(error_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    root.setLevel(log_level())
    _configured = True
