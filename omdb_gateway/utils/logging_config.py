"""
Logging setup for the gateway process.

Everything goes to stdout. When a file name is given, a size-rotated
file under ``log_dir`` receives the same records.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are chatty at INFO/DEBUG
QUIET_LOGGERS = ("urllib3", "requests")


def _resolve_level(level: str) -> int:
    return getattr(logging, str(level).upper(), logging.INFO)


def _console_handler() -> logging.Handler:
    return logging.StreamHandler(sys.stdout)


def _file_handler(path: Path, max_bytes: int, backup_count: int) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count)


def setup_logging(
    log_file: Optional[str] = None,
    level: str = "INFO",
    log_dir: str = "logs",
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> None:
    """
    Replace the root logger's handlers with the gateway's.

    Args:
        log_file: File name inside ``log_dir``; console only when None
        level: Level name such as 'DEBUG' or 'warning'; unknown names mean INFO
        log_dir: Directory created on demand for the log file
        max_bytes: Size at which the log file rotates
        backup_count: Rotated files kept
    """
    numeric_level = _resolve_level(level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: List[logging.Handler] = [_console_handler()]
    log_path = Path(log_dir) / log_file if log_file else None
    if log_path is not None:
        handlers.append(_file_handler(log_path, max_bytes, backup_count))

    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
    root.setLevel(numeric_level)
    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if log_path is not None:
        root.info(f"Writing logs to {log_path}")


def configure_api_logging(level: str = "INFO", log_file: Optional[str] = None, debug: bool = False):
    """Logging for the HTTP server; ``debug`` forces DEBUG."""
    setup_logging(log_file=log_file, level="DEBUG" if debug else level)
