"""FastAPI dependencies for identity, role guards and service construction"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.db import get_db
from app.models.user import User, UserRole
from app.services.jwt import JwtService
from app.services.mail import MailService, get_mail_service
from app.services.payments import PaymentService
from app.services.restaurants import RestaurantService
from app.services.users import UserService

FORBIDDEN = "Forbidden resource"


@lru_cache
def get_jwt_service() -> JwtService:
    return JwtService(settings.private_key, algorithm=settings.jwt_algorithm)


def get_auth_user(request: Request) -> Optional[User]:
    """User resolved by JwtMiddleware, or None for anonymous requests."""
    return getattr(request.state, "user", None)


def require_user(user: Optional[User] = Depends(get_auth_user)) -> User:
    if user is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=FORBIDDEN)
    return user


def require_role(*roles: UserRole):
    """Dependency factory allowing only users with one of ``roles``.

    Usage:
        @router.post("/payments")
        async def create_payment(owner: User = Depends(require_role(UserRole.OWNER))):
            ...
    """
    allowed = {UserRole(role).value for role in roles}

    def dependency(user: User = Depends(require_user)) -> User:
        if user.role not in allowed:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=FORBIDDEN)
        return user

    return dependency


def get_user_service(
    db: AsyncSession = Depends(get_db),
    jwt_service: JwtService = Depends(get_jwt_service),
    mail_service: MailService = Depends(get_mail_service),
) -> UserService:
    return UserService(
        db,
        jwt_service,
        mail_service,
        verification_ttl_minutes=settings.verification_code_ttl_minutes,
    )


def get_payment_service(db: AsyncSession = Depends(get_db)) -> PaymentService:
    return PaymentService(db, promotion_days=settings.promotion_days)


def get_restaurant_service(db: AsyncSession = Depends(get_db)) -> RestaurantService:
    return RestaurantService(db)
