from __future__ import annotations

import asyncio
import importlib
from datetime import datetime, timedelta
from unittest.mock import AsyncMock, patch

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.db import AsyncSessionLocal, async_engine
from app.models import Restaurant
from app.services.scheduler import SchedulerService, expire_promotions

from conftest import add_restaurant, add_user

# The package re-exports the scheduler instance under the module's name
scheduler_module = importlib.import_module("app.services.scheduler.scheduler_service")


async def load_restaurant(session_factory, restaurant_id: int) -> Restaurant:
    async with session_factory() as session:
        return await session.get(Restaurant, restaurant_id)


def failing_get_factory(bad_id: int):
    """Session factory whose sessions cannot load one restaurant."""

    class FlakySession(AsyncSession):
        async def get(self, entity, ident, **kwargs):
            if ident == bad_id:
                raise SQLAlchemyError("row is locked")
            return await super().get(entity, ident, **kwargs)

    return async_sessionmaker(async_engine, class_=FlakySession, expire_on_commit=False)


def test_expired_promotion_is_cleared(db):
    now = datetime.utcnow()

    async def scenario():
        owner = await add_user()
        expired = await add_restaurant(
            owner.id, is_promoted=True, promoted_until=now - timedelta(minutes=1)
        )
        cleared = await expire_promotions(db, now=now)
        return cleared, await load_restaurant(db, expired.id)

    cleared, restaurant = asyncio.run(scenario())

    assert cleared == 1
    assert restaurant.is_promoted is False
    assert restaurant.promoted_until is None


def test_active_promotion_is_left_untouched(db):
    now = datetime.utcnow()
    until = now + timedelta(days=3)

    async def scenario():
        owner = await add_user()
        active = await add_restaurant(owner.id, is_promoted=True, promoted_until=until)
        plain = await add_restaurant(owner.id, name="Burger Barn")
        cleared = await expire_promotions(db, now=now)
        return cleared, await load_restaurant(db, active.id), await load_restaurant(db, plain.id)

    cleared, active, plain = asyncio.run(scenario())

    assert cleared == 0
    assert active.is_promoted is True
    assert active.promoted_until == until
    assert plain.is_promoted is False


def test_failure_on_one_restaurant_does_not_block_others(db):
    now = datetime.utcnow()
    past = now - timedelta(hours=1)

    async def scenario():
        owner = await add_user()
        first = await add_restaurant(owner.id, is_promoted=True, promoted_until=past)
        second = await add_restaurant(owner.id, name="Burger Barn", is_promoted=True, promoted_until=past)
        cleared = await expire_promotions(failing_get_factory(first.id), now=now)
        return cleared, await load_restaurant(db, first.id), await load_restaurant(db, second.id)

    cleared, first, second = asyncio.run(scenario())

    assert cleared == 1
    assert first.is_promoted is True
    assert second.is_promoted is False


def test_scheduler_check_clears_expired_promotions(db):
    async def scenario():
        owner = await add_user()
        await add_restaurant(
            owner.id, is_promoted=True, promoted_until=datetime.utcnow() - timedelta(days=1)
        )
        return await SchedulerService(session_factory=db).check_promoted_restaurants()

    assert asyncio.run(scenario()) == 1


def test_scheduler_check_survives_errors():
    scheduler = SchedulerService(session_factory=AsyncSessionLocal)

    with patch.object(
        scheduler_module,
        "expire_promotions",
        AsyncMock(side_effect=SQLAlchemyError("database is gone")),
    ):
        cleared = asyncio.run(scheduler.check_promoted_restaurants())

    assert cleared == 0


def test_scheduler_start_and_stop():
    scheduler = SchedulerService(session_factory=AsyncSessionLocal, check_interval=3600)

    async def scenario():
        await scheduler.start()
        started = scheduler.running
        await scheduler.stop()
        return started, scheduler.running

    started, running = asyncio.run(scenario())

    assert started is True
    assert running is False
