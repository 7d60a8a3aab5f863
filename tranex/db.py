"""
Backend Clients - Supabase and Redis

Provides singleton instances of:
- Async Supabase client for catalog queries and auth
- Sync Upstash Redis client for the Redis storage backend
"""

import os
from typing import Optional

from supabase._async.client import AsyncClient
from supabase._async.client import create_client as acreate_client
from upstash_redis import Redis


# Environment variables
SUPABASE_URL = os.environ.get("SUPABASE_URL", "")
SUPABASE_ANON_KEY = os.environ.get("SUPABASE_ANON_KEY", "")

UPSTASH_REDIS_REST_URL = os.environ.get("UPSTASH_REDIS_REST_URL", "")
UPSTASH_REDIS_REST_TOKEN = os.environ.get("UPSTASH_REDIS_REST_TOKEN", "")

# Site settings
SITE_URL = os.environ.get("TRANEX_SITE_URL", "http://localhost:8000")
STORAGE_PATH = os.environ.get("TRANEX_STORAGE_PATH", ".tranex_storage.json")
COMPONENTS_BASE_URL = os.environ.get("TRANEX_COMPONENTS_BASE_URL", SITE_URL)


# Singleton instances
_async_supabase_client: Optional[AsyncClient] = None
_sync_redis_client: Optional[Redis] = None


def is_supabase_configured() -> bool:
    """True when catalog and auth can reach the hosted backend."""
    return bool(SUPABASE_URL and SUPABASE_ANON_KEY)


async def get_supabase() -> AsyncClient:
    """
    Get async Supabase client (singleton).
    Preferred for catalog and auth calls.
    """
    global _async_supabase_client

    if _async_supabase_client is None:
        if not is_supabase_configured():
            raise ValueError("SUPABASE_URL and SUPABASE_ANON_KEY must be set")
        _async_supabase_client = await acreate_client(SUPABASE_URL, SUPABASE_ANON_KEY)

    return _async_supabase_client


def get_redis_sync() -> Redis:
    """
    Get sync Upstash Redis client (singleton).

    The cart runs to completion without suspension points, so the
    Redis storage backend uses the blocking REST client.
    """
    global _sync_redis_client

    if _sync_redis_client is None:
        if not UPSTASH_REDIS_REST_URL or not UPSTASH_REDIS_REST_TOKEN:
            raise ValueError("UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN must be set")
        _sync_redis_client = Redis(url=UPSTASH_REDIS_REST_URL, token=UPSTASH_REDIS_REST_TOKEN)

    return _sync_redis_client


class StorageKeys:
    """Keys used in durable key-value storage."""

    CART = "tranex-cart"
    THEME = "tranex-theme"
    LANGUAGE = "tranex-language"

    # Prefix applied by the Redis backend
    REDIS_PREFIX = "tranex:"

    @staticmethod
    def redis_key(key: str, prefix: str = REDIS_PREFIX) -> str:
        return f"{prefix}{key}"
