"""HTTP middleware"""

from app.middleware.jwt import JwtMiddleware
from app.middleware.performance import PerformanceMiddleware

__all__ = [
    "JwtMiddleware",
    "PerformanceMiddleware",
]
