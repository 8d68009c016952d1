"""
Logging configuration for the movie catalog.

The API and the scripts share one format. Records go to stdout and, when a
file name is given, to a size-rotated file under the log directory.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import List, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers kept at WARNING; request lines come from the API middleware
QUIET_LOGGERS = ("urllib3", "sqlalchemy.engine", "uvicorn.access")


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(
    log_file: Optional[str] = None,
    level: str = "INFO",
    log_dir: str = "logs",
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5
) -> Optional[Path]:
    """
    Configure the root logger, replacing any handlers already installed.

    Args:
        log_file: Log file name inside log_dir; None logs to stdout only
        level: Level name such as 'DEBUG' or 'warning'
        log_dir: Directory created for the log file
        max_bytes: Size at which the log file rotates
        backup_count: Number of rotated files kept

    Returns:
        Path of the log file, or None when logging to stdout only

    Raises:
        ValueError: If level is not a known level name
    """
    log_level = _resolve_level(level)
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    log_path = None
    if log_file:
        log_path = Path(log_dir) / log_file
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(log_path, maxBytes=max_bytes, backupCount=backup_count)
        )

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if log_path is not None:
        logging.getLogger(__name__).info("Logging to file: %s", log_path)
    return log_path


def configure_script_logging(debug: bool = False):
    """Stdout logging for command line scripts, DEBUG when asked."""
    setup_logging(level="DEBUG" if debug else "INFO")
