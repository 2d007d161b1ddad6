"""Authentication and authorization dependencies"""

from app.services.auth.dependencies import (
    FORBIDDEN,
    get_auth_user,
    get_jwt_service,
    get_payment_service,
    get_restaurant_service,
    get_user_service,
    require_role,
    require_user,
)

__all__ = [
    "FORBIDDEN",
    "get_auth_user",
    "get_jwt_service",
    "get_payment_service",
    "get_restaurant_service",
    "get_user_service",
    "require_role",
    "require_user",
]
