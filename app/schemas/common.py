"""Common output schemas"""

from typing import Any

from pydantic import BaseModel


class CoreOutput(BaseModel):
    """Base output of every operation: ok flag plus an optional error message"""
    ok: bool
    error: str | None = None


class ErrorDetail(BaseModel):
    code: str
    message: str
    details: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Body returned by the global exception handler"""
    error: ErrorDetail
