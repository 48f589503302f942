"""Logging setup for the bookshelf package and its demo."""

import logging
import os
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# bookshelf.database and bookshelf.demo both propagate to this logger
PACKAGE_LOGGER = "bookshelf"
LOG_FILE = "bookshelf.log"
MAX_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 3


def _resolve_level(level) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(level="INFO", log_dir="logs"):
    """Log to the console, and to `log_dir/bookshelf.log` for package loggers.

    `level` is a name ("DEBUG") or a logging constant. The console handler
    goes on the root logger only if it has none yet; the rotating file
    handler goes on the "bookshelf" logger only if it has none yet. With
    `log_dir=None` no file is written.

    Returns the log file path, or None.
    """
    level = _resolve_level(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    root = logging.getLogger()
    if not root.handlers:
        root.setLevel(level)
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        root.addHandler(console)

    package = logging.getLogger(PACKAGE_LOGGER)
    package.setLevel(level)
    if log_dir is None:
        return None

    log_file = os.path.join(log_dir, LOG_FILE)
    if any(isinstance(h, RotatingFileHandler) for h in package.handlers):
        return log_file

    os.makedirs(log_dir, exist_ok=True)
    handler = RotatingFileHandler(log_file, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT)
    handler.setFormatter(formatter)
    package.addHandler(handler)
    return log_file
