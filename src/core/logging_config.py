"""
Logging Configuration Module.

Sets up the root logger for a session: a size-rotated ``agenda.log`` file
plus an optional console stream.
"""

import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler

LOG_DIR = "logs"
LOG_FILENAME = "agenda.log"
MAX_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 5
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class SafeRotatingFileHandler(RotatingFileHandler):
    """Keeps writing to the current file when Windows refuses a rollover."""

    def doRollover(self) -> None:
        try:
            super().doRollover()
        except PermissionError:
            if sys.platform != "win32":
                raise


def setup_logging(
    debug_mode: bool = False, log_to_console: bool = True, log_dir: str = LOG_DIR
) -> None:
    """
    Installs the session's log handlers on the root logger.

    Handlers from an earlier call are closed and replaced.

    Args:
        debug_mode: Log at DEBUG instead of INFO.
        log_to_console: Also log to stderr.
        log_dir: Directory holding ``agenda.log``; created if missing.
    """
    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError as e:
        print(f"Failed to create log directory: {e}. Logging to current directory.")
        log_path = LOG_FILENAME
    else:
        log_path = os.path.join(log_dir, LOG_FILENAME)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        handler.close()
    root_logger.handlers.clear()

    level = logging.DEBUG if debug_mode else logging.INFO
    root_logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    try:
        file_handler = SafeRotatingFileHandler(
            log_path, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8"
        )
    except OSError as e:
        print(f"CRITICAL: Could not set up file logging: {e}")
    else:
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        root_logger.addHandler(console_handler)

    logging.info(f"Project Agenda Session Started at {datetime.now().isoformat()}")


def get_logger(name: str) -> logging.Logger:
    """Returns the logger for ``name`` (usually ``__name__``)."""
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """Flushes and closes all handlers so the log file is released."""
    logging.shutdown()
