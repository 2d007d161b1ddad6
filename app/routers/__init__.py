"""API routers module"""

from app.routers.users import router as users_router
from app.routers.payments import router as payments_router
from app.routers.restaurants import router as restaurants_router

__all__ = [
    "users_router",
    "payments_router",
    "restaurants_router",
]
