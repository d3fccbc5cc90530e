"""Logging configuration for the interactive session.

The terminal is in raw alternate-screen mode while the shell runs, so log
records go to a file instead of stderr.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOG_FILENAME = f"{APP_NAME}.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def default_log_path() -> Path:
    return Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME


def configure_logging(level: str | int = logging.WARNING, path: Path | None = None) -> logging.Logger:
    """Attach a file handler to the package logger and return it.

    Repeated calls replace the previously attached handler.
    """
    log_path = path if path is not None else default_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger = logging.getLogger(APP_NAME)
    for existing in list(package_logger.handlers):
        if getattr(existing, "_lazyedit_handler", False):
            package_logger.removeHandler(existing)
            existing.close()
    handler._lazyedit_handler = True  # type: ignore[attr-defined]
    package_logger.addHandler(handler)
    package_logger.setLevel(level if isinstance(level, int) else level.upper())
    package_logger.propagate = False
    return package_logger
