"""Request identity resolution from the x-jwt header."""

from typing import Callable

from fastapi import Request, Response
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.models.user import User
from app.services.jwt import InvalidTokenError, JwtService
from app.utils.constants import JWT_HEADER_NAME
from app.utils.logger import logger
from app.utils.sentry_utils import set_user_context


class JwtMiddleware(BaseHTTPMiddleware):
    """Attach the user named by the x-jwt token to ``request.state.user``.

    This only resolves identity. A missing or bad token, an unknown user or
    a storage error leaves ``request.state.user`` as None and the request
    carries on; route guards decide whether a user is required.
    """

    def __init__(
        self,
        app: ASGIApp,
        jwt_service: JwtService,
        session_factory: Callable[[], AsyncSession],
    ):
        super().__init__(app)
        self.jwt_service = jwt_service
        self.session_factory = session_factory

    async def resolve_user(self, token: str) -> User | None:
        try:
            user_id = self.jwt_service.verify(token)
        except InvalidTokenError as e:
            logger.warning(f"Rejected {JWT_HEADER_NAME} token: {e}")
            return None

        try:
            async with self.session_factory() as session:
                user = await session.get(User, user_id)
        except Exception as e:
            logger.warning(f"Could not load user {user_id} for token: {e}")
            return None

        if user is None:
            logger.warning(f"Token refers to unknown user {user_id}")
        return user

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        user = None
        token = request.headers.get(JWT_HEADER_NAME)
        if token:
            user = await self.resolve_user(token)
            if user is not None:
                set_user_context(user.id, user.email)

        request.state.user = user
        return await call_next(request)
