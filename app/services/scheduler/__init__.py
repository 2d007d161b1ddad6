"""Background scheduler service module for periodic tasks."""

from app.services.scheduler.scheduler_service import (
    SchedulerService,
    expire_promotions,
    scheduler_service,
)

__all__ = [
    "SchedulerService",
    "expire_promotions",
    "scheduler_service",
]
