"""
Background scheduler for periodic tasks.

Runs inside the FastAPI process; started and stopped by the app lifespan.
"""

import asyncio
from datetime import datetime
from typing import Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.restaurant import Restaurant
from app.utils import logger

SessionFactory = Callable[[], AsyncSession]


async def expire_promotions(
    session_factory: SessionFactory,
    now: Optional[datetime] = None,
) -> int:
    """Clear the promotion of every restaurant whose window has passed.

    Each restaurant is saved in its own session so one failing row does not
    block the rest. Returns the number of restaurants cleared.
    """
    now = now or datetime.utcnow()

    async with session_factory() as session:
        result = await session.execute(
            select(Restaurant.id).where(
                Restaurant.is_promoted.is_(True),
                Restaurant.promoted_until < now,
            )
        )
        expired_ids = list(result.scalars().all())

    cleared = 0
    for restaurant_id in expired_ids:
        try:
            async with session_factory() as session:
                restaurant = await session.get(Restaurant, restaurant_id)
                if restaurant is None:
                    continue
                restaurant.is_promoted = False
                restaurant.promoted_until = None
                await session.commit()
            cleared += 1
        except Exception as e:
            logger.error(f"Failed to clear promotion of restaurant {restaurant_id}: {e}", exc_info=True)

    return cleared


class SchedulerService:
    """
    Background scheduler that runs periodic tasks.

    Currently handles:
    - Un-promoting restaurants whose promotion window has elapsed
    """

    def __init__(
        self,
        session_factory: Optional[SessionFactory] = None,
        check_interval: Optional[int] = None,
    ):
        self._task: Optional[asyncio.Task] = None
        self._running = False
        self._session_factory = session_factory
        self.check_interval = check_interval or settings.promotion_check_interval

    @property
    def running(self) -> bool:
        return self._running

    @property
    def session_factory(self) -> SessionFactory:
        if self._session_factory is None:
            from app.db import AsyncSessionLocal

            self._session_factory = AsyncSessionLocal
        return self._session_factory

    async def start(self):
        """Start the background scheduler."""
        if self._running:
            logger.warning("Scheduler already running")
            return

        self._running = True
        self._task = asyncio.create_task(self._run_scheduler())
        logger.info(f"Background scheduler started (check_interval={self.check_interval}s)")

    async def stop(self):
        """Stop the background scheduler."""
        if not self._running:
            return

        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        logger.info("Background scheduler stopped")

    async def _run_scheduler(self):
        """Main scheduler loop. Fixed interval, no catch-up for missed ticks."""
        while self._running:
            try:
                await asyncio.sleep(self.check_interval)
            except asyncio.CancelledError:
                break

            await self.check_promoted_restaurants()

    async def check_promoted_restaurants(self) -> int:
        try:
            cleared = await expire_promotions(self.session_factory)
        except Exception as e:
            logger.error(f"Scheduler error in promotion check: {e}", exc_info=True)
            return 0

        if cleared > 0:
            logger.info(f"Scheduler: cleared {cleared} expired promotion(s)")
        return cleared


# Global scheduler instance
scheduler_service = SchedulerService()
