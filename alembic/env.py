"""Alembic migration environment configuration"""

import os
import sys
from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine

# Add project root and this directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
from env_config import get_database_url

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

from app.db.database import Base
from app.models import *  # noqa: F401, F403

target_metadata = Base.metadata


def include_object(object, name, type_, reflected, compare_to):
    """Skip tables that exist in the database but not in the models."""
    if compare_to is None and type_ == "table":
        return False
    return True


def run_migrations_offline() -> None:
    context.configure(
        url=get_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        include_object=include_object,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    engine = create_engine(get_database_url())

    with engine.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            include_object=include_object,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
