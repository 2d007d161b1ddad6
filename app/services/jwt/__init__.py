"""Identity token service module"""

from app.services.jwt.jwt_service import InvalidTokenError, JwtService

__all__ = [
    "InvalidTokenError",
    "JwtService",
]
