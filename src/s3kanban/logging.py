"""Centralized logging configuration for s3kanban.

Provides rotating file logs with consistent formatting across all components.
"""

from __future__ import annotations

import logging
import os
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Default configuration
DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_FILE = "s3kanban.log"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_BACKUP_COUNT = 5
DEFAULT_LOG_LEVEL = "INFO"

# Log format
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_dir: str | Path | None = None,
    log_file: str = DEFAULT_LOG_FILE,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    level: str | None = None,
    console: bool = True,
) -> logging.Logger:
    """Set up logging with rotating file handler.

    Args:
        log_dir: Directory for log files. Defaults to 'logs' in current directory.
                 Can be overridden with S3KANBAN_LOG_DIR environment variable.
        log_file: Log file name. Defaults to 's3kanban.log'.
        max_bytes: Maximum size per log file before rotation. Defaults to 10MB.
        backup_count: Number of backup files to keep. Defaults to 5.
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to INFO.
               Can be overridden with S3KANBAN_LOG_LEVEL environment variable.
        console: Whether to also log to console. Defaults to True.

    Returns:
        The root s3kanban logger.
    """
    if log_dir is None:
        log_dir = os.environ.get("S3KANBAN_LOG_DIR", DEFAULT_LOG_DIR)
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    if level is None:
        level = os.environ.get("S3KANBAN_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("s3kanban")
    logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    log_path = log_dir / log_file
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.info("s3kanban logging initialized (level=%s, file=%s)", level, log_path)

    return logger
