"""
Error response models.

Shape of the body routes return when a ChairbookError is translated into
an HTTPException with `detail=e.to_dict()`.
"""

from pydantic import BaseModel
from typing import Any


class ErrorResponse(BaseModel):
    """Serialized ChairbookError."""

    error: str
    message: str
    details: dict[str, Any] = {}


class HTTPErrorResponse(BaseModel):
    """FastAPI wraps HTTPException bodies in `detail`."""

    detail: ErrorResponse
