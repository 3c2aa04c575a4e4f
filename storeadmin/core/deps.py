"""Dependency injection for FastAPI routes."""

from collections.abc import AsyncGenerator
from typing import TYPE_CHECKING, Annotated
from uuid import UUID

import redis.asyncio as aioredis
from fastapi import Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storeadmin.core.auth import CurrentUser, get_current_user, get_user_id
from storeadmin.core.config import settings
from storeadmin.core.database import get_async_session
from storeadmin.integrations.stripe.client import StripeClient

if TYPE_CHECKING:
    from storeadmin.models.store import Store


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a request-scoped database session."""
    async for session in get_async_session():
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db)]


# Shared Redis connection pool
_redis_pool: aioredis.ConnectionPool | None = None


def _get_redis_pool() -> aioredis.ConnectionPool:
    global _redis_pool  # noqa: PLW0603
    if _redis_pool is None:
        _redis_pool = aioredis.ConnectionPool.from_url(
            str(settings.redis_url), decode_responses=True
        )
    return _redis_pool


async def get_redis() -> AsyncGenerator[aioredis.Redis, None]:
    """Yield a Redis client from the shared connection pool."""
    pool = _get_redis_pool()
    r = aioredis.Redis(connection_pool=pool)
    try:
        yield r
    finally:
        await r.aclose()


RedisClient = Annotated[aioredis.Redis, Depends(get_redis)]


def get_stripe_client() -> StripeClient:
    """Stripe client authenticated with the platform secret key."""
    return StripeClient(settings.stripe_secret_key)


Stripe = Annotated[StripeClient, Depends(get_stripe_client)]


async def get_active_store(store_id: UUID, db: DBSession) -> "Store":
    """Resolve the store named in the path for public storefront reads."""
    from storeadmin.models.store import Store

    query = select(Store).where(
        Store.id == store_id,
        Store.is_active == True,  # noqa: E712
    )
    result = await db.execute(query)
    store = result.scalar_one_or_none()

    if not store:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Store not found",
        )

    return store


async def get_store_for_user(store_id: UUID, user: CurrentUser, db: DBSession) -> "Store":
    """Resolve the store named in the path, requiring the caller to own it.

    A store that is missing, inactive, or owned by someone else is reported
    the same way so store ids cannot be enumerated.
    """
    from storeadmin.models.store import Store

    query = select(Store).where(
        Store.id == store_id,
        Store.user_id == get_user_id(user),
        Store.is_active == True,  # noqa: E712
    )
    result = await db.execute(query)
    store = result.scalar_one_or_none()

    if not store:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Unauthorized",
        )

    return store


__all__ = [
    "CurrentUser",
    "DBSession",
    "RedisClient",
    "Stripe",
    "get_active_store",
    "get_current_user",
    "get_db",
    "get_redis",
    "get_store_for_user",
    "get_stripe_client",
]
