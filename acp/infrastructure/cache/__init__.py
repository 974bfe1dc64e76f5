"""Cache: Redis service. Key builders live in acp.core.cache_keys."""

from acp.infrastructure.cache.redis_cache import CacheService

__all__ = ["CacheService"]
