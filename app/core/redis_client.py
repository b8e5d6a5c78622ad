# app/core/redis_client.py
"""
Redis connection pool used by the toggle rate limiter.

The pool lives for the lifetime of the app (see `lifespan`). Without
REDIS_URL, or when the pool cannot be built, `get_redis_client` yields None
and the limiter lets requests through.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import redis.asyncio as redis

from app.core.config import settings

logger = logging.getLogger(__name__)

_pool: Optional[redis.ConnectionPool] = None


def open_pool() -> Optional[redis.ConnectionPool]:
    global _pool
    if _pool is not None:
        return _pool
    if not settings.redis_url:
        logger.warning("REDIS_URL is not set, toggle rate limiting is off")
        return None
    try:
        _pool = redis.ConnectionPool.from_url(
            settings.redis_url,
            encoding="utf-8",
            decode_responses=True,
            health_check_interval=30,
        )
        logger.info("Redis pool ready")
    except (redis.RedisError, ValueError) as e:
        # Bad URL; limiter stays off until restart
        logger.error(f"Could not build Redis pool: {e}", exc_info=True)
    return _pool


async def close_pool():
    global _pool
    pool, _pool = _pool, None
    if pool is None:
        return
    try:
        await pool.disconnect(inuse_connections=True)
    except redis.RedisError as e:
        logger.error(f"Error while closing Redis pool: {e}", exc_info=True)


async def get_redis_client() -> AsyncGenerator[Optional[redis.Redis], None]:
    """FastAPI dependency: a client bound to the shared pool, or None."""
    pool = open_pool()
    yield redis.Redis(connection_pool=pool) if pool is not None else None


@asynccontextmanager
async def lifespan(app):
    from app.core.database import init_db

    logger.info(f"{settings.app_name} starting: creating tables, opening Redis pool")
    init_db()
    open_pool()
    yield
    await close_pool()
    logger.info(f"{settings.app_name} stopped")
