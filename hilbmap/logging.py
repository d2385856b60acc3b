"""Package logging.

Handlers live on the ``hilbmap`` logger only; module loggers are its children
and propagate to it, so every module shares one console stream and one
rotating ``hilbmap.log``.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

PACKAGE_LOGGER = "hilbmap"
LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
LOG_DIR_ENV_VAR = "HILBMAP_LOG_DIR"
DEFAULT_LOG_DIR = Path.home() / ".hilbmap" / "logs"
LOG_FILENAME = "hilbmap.log"
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10 MiB
BACKUP_COUNT = 5


def _resolve_log_directory() -> Path:
    log_dir = os.getenv(LOG_DIR_ENV_VAR)
    path = Path(log_dir).expanduser() if log_dir else DEFAULT_LOG_DIR
    path.mkdir(parents=True, exist_ok=True)
    return path


def _configure_package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    level_name = os.getenv(LOG_LEVEL_ENV_VAR, "INFO").upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    file_handler = RotatingFileHandler(
        _resolve_log_directory() / LOG_FILENAME,
        maxBytes=MAX_LOG_BYTES,
        backupCount=BACKUP_COUNT,
    )
    for handler in (logging.StreamHandler(), file_handler):
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, configuring the package logger on first use."""

    _configure_package_logger()
    return logging.getLogger(name)
