"""Environment detection utilities."""

import os


def get_environment() -> str:
    """Get the current environment name ('local', 'staging' or 'production')."""
    return os.getenv("ENV", "local")


def is_production() -> bool:
    return get_environment() == "production"


def is_debug() -> bool:
    """True when ENV is 'local' or not set."""
    return get_environment() == "local"
