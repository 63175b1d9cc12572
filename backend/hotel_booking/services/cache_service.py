"""
Redis cache for the "my booking" read.

What we cache:
  - The serialized GET /booking response, per user
  - Key pattern: "booking:user:{user_id}"

Invalidation:
  - create_booking and move_booking delete the caller's key once the
    write succeeds (see api.routes.bookings)
  - TTL (REDIS_CACHE_TTL) bounds staleness if an invalidation is lost

Failure policy:
  Redis is advisory. Any Redis error is logged and treated as a miss, the
  database stays the source of truth. REDIS_ENABLED=false turns the cache
  off entirely.
"""

import json
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError
from hotel_booking.core.config import get_settings
from hotel_booking.core.logging import get_logger
from hotel_booking.core.metrics import record_cache_operation, redis_connection_errors

logger = get_logger(__name__)
settings = get_settings()

_redis_client: Optional[redis.Redis] = None


async def get_redis() -> Optional[redis.Redis]:
    """Get or create Redis connection. Returns None if Redis is disabled or down."""
    global _redis_client

    if not settings.REDIS_ENABLED:
        return None

    if _redis_client is None:
        client = redis.from_url(
            settings.REDIS_URL,
            encoding="utf-8",
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry_on_timeout=True,
        )
        try:
            await client.ping()
        except (RedisError, OSError) as e:
            redis_connection_errors.inc()
            logger.error("redis_connection_failed", error=str(e))
            await client.aclose()
            return None
        logger.info("redis_connected", url=settings.REDIS_URL)
        _redis_client = client

    return _redis_client


async def close_redis() -> None:
    """Close Redis connection on shutdown."""
    global _redis_client
    if _redis_client:
        await _redis_client.aclose()
        _redis_client = None


def _make_booking_key(user_id: int) -> str:
    return f"booking:user:{user_id}"


async def get_cached_booking(user_id: int) -> Optional[dict]:
    client = await get_redis()
    if not client:
        return None

    key = _make_booking_key(user_id)
    try:
        data = await client.get(key)
    except RedisError as e:
        logger.error("cache_get_error", key=key, error=str(e))
        return None

    record_cache_operation("get", hit=data is not None)
    if data:
        logger.debug("cache_hit", key=key)
        return json.loads(data)
    logger.debug("cache_miss", key=key)
    return None


async def set_cached_booking(user_id: int, data: dict) -> None:
    client = await get_redis()
    if not client:
        return

    key = _make_booking_key(user_id)
    try:
        await client.setex(key, settings.REDIS_CACHE_TTL, json.dumps(data, default=str))
        logger.debug("cache_set", key=key, ttl=settings.REDIS_CACHE_TTL)
    except RedisError as e:
        logger.error("cache_set_error", key=key, error=str(e))


async def invalidate_booking_cache(user_id: int) -> None:
    client = await get_redis()
    if not client:
        return

    key = _make_booking_key(user_id)
    try:
        await client.delete(key)
        logger.info("cache_invalidated", key=key)
    except RedisError as e:
        logger.error("cache_invalidation_error", key=key, error=str(e))


async def get_cache_stats() -> dict:
    """Get Redis cache statistics for monitoring."""
    client = await get_redis()
    if not client:
        return {"status": "disabled"}

    try:
        info = await client.info("stats")
    except RedisError as e:
        return {"status": "error", "error": str(e)}

    hits = info.get("keyspace_hits", 0)
    misses = info.get("keyspace_misses", 0)
    return {
        "status": "connected",
        "hits": hits,
        "misses": misses,
        "hit_rate": round(hits / max(hits + misses, 1) * 100, 2),
    }
