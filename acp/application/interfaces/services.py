"""Service interfaces (ports) for the application layer."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from acp.shared.enums import AuditAction


class ICacheService(Protocol):
    """Minimal key-value cache (derived role facts, user lookups)."""

    def is_available(self) -> bool:
        """Return True if cache is connected."""

    async def get(self, key: str) -> Any:
        """Return cached value or None."""

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """Store value with TTL. Returns True on success."""

    async def invalidate(self, key: str) -> bool:
        """Drop key. Missing keys are a no-op. Returns True if the delete ran."""


class IRoleResolver(Protocol):
    """Authoritative role membership (used to repopulate the derived cache)."""

    async def has_role_named(self, user_id: str, role_name: str) -> bool:
        """Return True if the user currently holds the named role."""


class ICapabilityChecker(Protocol):
    """Gate check: may principal perform capability?"""

    async def has_capability(self, user_id: str, capability: str) -> bool: ...

    async def require_capability(self, user_id: str, capability: str) -> None:
        """Raise AuthorizationException if the user lacks capability."""

    async def invalidate_role(self, user_id: str, role_name: str) -> bool:
        """Drop the derived user:<id>:is:<role> entry."""

    async def invalidate_user(self, user_id: str) -> bool:
        """Drop the user:<id> entry."""


class ITransactionHooks(Protocol):
    """Work that must wait for the surrounding write transaction to commit."""

    def after_commit(self, callback: Callable[[], Awaitable[Any]]) -> None:
        """Run callback once the transaction has committed; dropped on rollback."""


class IAuditService(Protocol):
    """Records who changed what (actor, subject, before, after)."""

    async def record(
        self,
        actor_id: str | None,
        action: AuditAction,
        resource_type: str,
        resource_id: str | None,
        before: dict[str, Any] | None,
        after: dict[str, Any] | None,
    ) -> None: ...
