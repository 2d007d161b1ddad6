"""Logging configuration for the application."""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from app.utils.environment import is_debug

LOGGER_NAME = "nuber-eats"


def setup_logger(
    name: str = LOGGER_NAME,
    log_file: str | None = None,
    log_level: str | None = None,
) -> logging.Logger:
    """Configure and return the application logger.

    Args:
        name: Logger name
        log_file: Path to a rotating log file (default: LOG_FILE env, unset means console only)
        log_level: Log level (default: LOG_LEVEL env, DEBUG locally and INFO when deployed)

    Returns:
        Configured logger instance
    """
    if log_level is None:
        log_level = os.getenv("LOG_LEVEL", "DEBUG" if is_debug() else "INFO")

    level = getattr(logging, log_level.upper(), logging.INFO)

    log = logging.getLogger(name)
    log.setLevel(level)

    if log.handlers:
        return log

    log_format = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(log_format)
    log.addHandler(console_handler)

    if log_file is None:
        log_file = os.getenv("LOG_FILE")

    if log_file:
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            # 10MB per file, 5 backups
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(log_format)
            log.addHandler(file_handler)
        except OSError as e:
            log.warning(f"Failed to create file handler for {log_file}: {e}")

    log.propagate = False

    return log


logger = setup_logger()


def get_logger(name: str) -> logging.Logger:
    """Get a child of the application logger.

    Child loggers share the application handlers through propagation.
    """
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
