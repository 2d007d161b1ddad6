"""Request timing middleware."""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.utils.logger import logger


class PerformanceMiddleware(BaseHTTPMiddleware):
    """Log request duration and expose it as the X-Process-Time header.

    Requests slower than SLOW_REQUEST_THRESHOLD are logged as warnings;
    health and docs endpoints are never logged.
    """

    SLOW_REQUEST_THRESHOLD = 0.5  # seconds

    EXCLUDED_PATHS = {
        "/health",
        "/",
        "/docs",
        "/openapi.json",
    }

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        process_time = time.perf_counter() - start_time

        response.headers["X-Process-Time"] = f"{process_time:.4f}"

        path = request.url.path
        if path in self.EXCLUDED_PATHS:
            return response

        if process_time >= self.SLOW_REQUEST_THRESHOLD:
            logger.warning(f"[SLOW REQUEST] {request.method} {path} - {process_time:.3f}s")
        else:
            logger.debug(f"[REQUEST] {request.method} {path} - {process_time:.3f}s")

        return response
