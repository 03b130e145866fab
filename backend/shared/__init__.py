"""
Shared infrastructure for the Chairbook backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- models: Authenticated user and per-request session context

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import (
    create_async_supabase_client,
    get_supabase_client,
    reset_client_cache,
)
from .exceptions import (
    ChairbookError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)
from .models import AuthenticatedUser, SessionContext

__all__ = [
    "Settings",
    "get_settings",
    "create_async_supabase_client",
    "get_supabase_client",
    "reset_client_cache",
    "ChairbookError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "AuthenticatedUser",
    "SessionContext",
]
