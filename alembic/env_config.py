"""
Environment configuration for Alembic migrations.
Loads the .env file of the current ENV and exposes the sync database URL.
"""

import os

from dotenv import load_dotenv

env = os.getenv("ENV", "local")
dotenv_file = f".env.{env}"
load_dotenv(dotenv_file)


def get_database_url() -> str:
    """Database URL without the async driver, built from app settings."""
    # Imported after load_dotenv so the settings see the .env values
    from app.config import Settings

    return Settings().sync_database_url
