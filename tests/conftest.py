"""
Shared fixtures: a temporary SQLite database and mocked collaborators.

DATABASE_URL is set before any app module is imported so the engine in
app.db binds to the temporary file.
"""
from __future__ import annotations

import asyncio
import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

_DB_DIR = tempfile.mkdtemp(prefix="nuber-eats-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR}/test.db"
os.environ["PRIVATE_KEY"] = "test-private-key"

from app.db import AsyncSessionLocal, Base, async_engine  # noqa: E402
from app.models import Restaurant, User, UserRole  # noqa: E402
from app.services.jwt import JwtService  # noqa: E402
from app.services.mail import MailService  # noqa: E402
from app.services.users import hash_password  # noqa: E402


async def _reset_schema():
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


async def _drop_schema():
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture()
def db():
    """Fresh tables for every test."""
    asyncio.run(_reset_schema())
    yield AsyncSessionLocal
    asyncio.run(_drop_schema())


@pytest.fixture()
def jwt_service():
    return JwtService("test-private-key")


@pytest.fixture()
def mail_service():
    service = MagicMock(spec=MailService)
    service.send_verification_email = AsyncMock(return_value=True)
    return service


async def add_user(
    email: str = "owner@example.com",
    password: str = "12345",
    role: UserRole = UserRole.CLIENT,
    verified: bool = False,
) -> User:
    async with AsyncSessionLocal() as session:
        user = User(
            email=email,
            password=hash_password(password),
            role=role.value,
            verified=verified,
        )
        session.add(user)
        await session.commit()
        return user


async def add_restaurant(owner_id: int | None, **fields) -> Restaurant:
    async with AsyncSessionLocal() as session:
        restaurant = Restaurant(
            name=fields.pop("name", "Vegan Palace"),
            address=fields.pop("address", "123 Main St"),
            owner_id=owner_id,
            **fields,
        )
        session.add(restaurant)
        await session.commit()
        return restaurant
