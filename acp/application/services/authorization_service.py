"""Authorization service: capability checks over cached role facts (IRoleResolver + cache)."""

from __future__ import annotations

import logging

from acp.application.interfaces.services import ICacheService, IRoleResolver
from acp.core.cache_keys import role_key, user_key
from acp.core.constants import CAPABILITY_ROLES
from acp.domain.exceptions import AuthorizationException

logger = logging.getLogger(__name__)


class AuthorizationService:
    """Gate checks. Role facts are cached under user:<id>:is:<role> (5 min TTL typical)."""

    def __init__(
        self,
        role_resolver: IRoleResolver,
        cache: ICacheService | None = None,
        cache_ttl: int = 300,
    ) -> None:
        self.role_resolver = role_resolver
        self.cache = cache
        self.cache_ttl = cache_ttl

    async def has_role(self, user_id: str, role_name: str) -> bool:
        """Return True if user holds role_name. Uses cache if available."""
        key = role_key(user_id, role_name)
        if self.cache and self.cache.is_available():
            cached = await self.cache.get(key)
            if cached is not None:
                return bool(cached)

        held = await self.role_resolver.has_role_named(user_id, role_name)
        if self.cache and self.cache.is_available():
            await self.cache.set(key, held, ttl=self.cache_ttl)
        return held

    async def has_capability(self, user_id: str, capability: str) -> bool:
        """Return True if user holds any role that grants capability."""
        for role_name in CAPABILITY_ROLES.get(capability, ()):
            if await self.has_role(user_id, role_name):
                return True
        return False

    async def require_capability(self, user_id: str, capability: str) -> None:
        """Raise AuthorizationException if user lacks capability."""
        if not await self.has_capability(user_id, capability):
            logger.info("Permission denied: user=%s capability=%s", user_id, capability)
            raise AuthorizationException(capability=capability)

    async def invalidate_role(self, user_id: str, role_name: str) -> bool:
        """Drop the derived role fact. Attempted even when the cache is down."""
        if self.cache is None:
            return False
        return await self.cache.invalidate(role_key(user_id, role_name))

    async def invalidate_user(self, user_id: str) -> bool:
        """Drop the cached user entry."""
        if self.cache is None:
            return False
        return await self.cache.invalidate(user_key(user_id))
