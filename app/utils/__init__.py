"""Utility modules for the food delivery backend."""

from app.utils.logger import logger, setup_logger, get_logger
from app.utils.environment import is_production, is_debug, get_environment
from app.utils.sentry_utils import configure_sentry, capture_exception
from app.utils.constants import (
    API_VERSION,
    API_PREFIX,
    JWT_HEADER_NAME,
)

__all__ = [
    # Logger
    "logger",
    "setup_logger",
    "get_logger",
    # Environment
    "is_production",
    "is_debug",
    "get_environment",
    # Sentry
    "configure_sentry",
    "capture_exception",
    # Constants
    "API_VERSION",
    "API_PREFIX",
    "JWT_HEADER_NAME",
]
