"""
Logging configuration for wordform.

The library itself never configures logging; modules only create loggers
under the "wordform" namespace. Applications (and the wordform CLI) call
setup_logging() to attach handlers.

Console output goes to stderr so it never mixes with CLI results on stdout.
File logging, when enabled, writes wordform-YYYY-MM-DD.log with daily rotation.
"""

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
    backup_count: int = 30,  # Keep 30 days of logs
    console: bool = True,
) -> logging.Logger:
    """
    Set up logging for wordform.

    Args:
        log_dir: Directory for daily-rotated log files (None: no file logging)
        level: Logging level (default: INFO)
        backup_count: Number of daily backup files to keep (default: 30 days)
        console: If True, also log to stderr

    Returns:
        Configured "wordform" logger
    """
    logger = logging.getLogger("wordform")
    logger.setLevel(level)

    # Check existing handlers to avoid duplicates
    has_file_handler = any(
        isinstance(h, logging.handlers.TimedRotatingFileHandler)
        for h in logger.handlers
    )
    has_console_handler = any(
        isinstance(h, logging.StreamHandler)
        and not isinstance(h, logging.FileHandler)
        and h.stream is sys.stderr
        for h in logger.handlers
    )

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if log_dir is not None and not has_file_handler:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"wordform-{datetime.now().strftime('%Y-%m-%d')}.log"

        file_handler = logging.handlers.TimedRotatingFileHandler(
            log_file,
            when="midnight",
            interval=1,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.info(f"Log file: {log_file}")

    if console and not has_console_handler:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.debug(f"Log level: {logging.getLevelName(level)}")
    return logger


def get_logger(name: str = "wordform") -> logging.Logger:
    """
    Get a wordform logger.

    Args:
        name: Logger name (default: "wordform")

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
