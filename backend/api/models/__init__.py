"""API models package."""

from .user import TokenPayload
from .errors import ErrorResponse, HTTPErrorResponse

__all__ = [
    "TokenPayload",
    "ErrorResponse",
    "HTTPErrorResponse",
]
