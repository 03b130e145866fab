"""
Database client factory for Supabase.

Provides the cached service-role client for request handling and async
clients for realtime subscriptions. Ownership is enforced in the services.
"""

from typing import Optional
from supabase import AsyncClient, Client, acreate_client, create_client

from .config import get_settings

# Module-level client cache
_service_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    Use this for backend operations that need full database access,
    such as writing audit rows or reading profiles on behalf of users.

    Returns:
        Supabase client configured with service role key
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client
    _service_client = None


async def create_async_supabase_client() -> AsyncClient:
    """
    Create an async Supabase client for realtime subscriptions.

    Realtime channels are only available on the async client. A new client
    is returned on each call; the caller owns its lifetime.

    Returns:
        Async Supabase client configured with service role key
    """
    settings = get_settings()
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
        )
    return await acreate_client(
        settings.supabase_url,
        settings.supabase_service_role_key,
    )
