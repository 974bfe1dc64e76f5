"""Redis-based cache service.

Async Redis caching with TTL. Holds derived role facts (user:<id>:is:<role>)
and user entries; both are non-authoritative and safe to lose. When Redis is
down every read is a miss and every write or invalidation is reported as not
performed, never raised.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import redis.asyncio as redis

from acp.core.config import get_settings

logger = logging.getLogger(__name__)


class CacheService:
    """Async Redis cache service with TTL support.

    Call connect() at startup and disconnect() at shutdown. A pre-built
    client may be injected (tests, DI); connect() then only pings it.
    """

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        self.redis = redis_client
        self._connected = False

    async def connect(self) -> None:
        """Establish (or verify) the Redis connection. Call on app startup."""
        if self.redis is None:
            settings = get_settings()
            self.redis = redis.Redis(
                host=settings.redis_host,
                port=settings.redis_port,
                db=settings.redis_db,
                password=settings.redis_password.get_secret_value()
                if settings.redis_password
                else None,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_keepalive=True,
            )
        try:
            await self.redis.ping()
            self._connected = True
            logger.info("Redis cache connected")
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Redis connection failed: %s. Cache disabled.", e)
            self._connected = False
            self.redis = None

    async def disconnect(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            self._connected = False
            logger.info("Redis cache disconnected")

    def is_available(self) -> bool:
        """Return True if Redis is connected and usable."""
        return self._connected and self.redis is not None

    async def get(self, key: str) -> Any | None:
        """Return cached value (JSON-deserialized) or None if missing/unavailable."""
        if not self.is_available() or self.redis is None:
            return None
        try:
            value = await self.redis.get(key)
        except redis.RedisError:
            logger.exception("Cache get error for key %s", key)
            return None
        if value is None:
            logger.debug("Cache MISS: %s", key)
            return None
        logger.debug("Cache HIT: %s", key)
        return json.loads(value)

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """Store value (JSON-serializable) with TTL in seconds. Returns True on success."""
        if not self.is_available() or self.redis is None:
            return False
        try:
            await self.redis.setex(key, ttl, json.dumps(value))
        except redis.RedisError:
            logger.exception("Cache set error for key %s", key)
            return False
        logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)
        return True

    async def invalidate(self, key: str) -> bool:
        """Remove key. A missing key is a no-op.

        Returns True when the delete reached Redis (whether or not the key
        existed), False when the cache is unavailable or the call failed.
        """
        if not self.is_available() or self.redis is None:
            logger.warning("Cache INVALIDATE skipped (cache unavailable): %s", key)
            return False
        try:
            await self.redis.delete(key)
        except redis.RedisError:
            logger.exception("Cache invalidate error for key %s", key)
            return False
        logger.debug("Cache INVALIDATE: %s", key)
        return True
