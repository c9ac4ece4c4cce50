"""
Logging for the CLI and API entry points.

core/ and web/ only ever call logging.getLogger(__name__); handlers are
attached once, here, by main_cli.py / main_web.py.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import resolve_path, settings

LOGS_DIR: Path = resolve_path(settings.LOG_DIR)

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s:%(lineno)d] %(message)s"


def log_path(log_file: str | Path) -> Path:
    """Absolute paths as given; bare names (directories dropped) under LOGS_DIR."""
    path = Path(log_file)
    if path.is_absolute():
        return path
    LOGS_DIR.mkdir(parents=True, exist_ok=True)
    return LOGS_DIR / path.name


def setup_logging(
    name: Optional[str] = None,
    log_file: str | Path = settings.LOG_FILE,
    level: int | str = settings.LOG_LEVEL,
    max_bytes: int = settings.LOG_MAX_BYTES,
    backup_count: int = settings.LOG_BACKUP_COUNT,
) -> logging.Logger:
    """
    Rotating file + stderr for `name` (root logger by default).

    Calling it again replaces the handlers instead of stacking them; the old
    ones are closed so the log file is released.
    """
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = [
        RotatingFileHandler(log_path(log_file), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"),
        logging.StreamHandler(),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger
