"""Unit tests for AuthorizationService (capability gate over cached role facts)."""

from unittest.mock import AsyncMock

import pytest

from acp.application.services import AuthorizationService
from acp.domain.exceptions import AuthorizationException


async def test_has_role_caches_resolver_answer(cache) -> None:
    """First check hits the resolver and stores the boolean; second is served from cache."""
    resolver = AsyncMock()
    resolver.has_role_named.return_value = True
    svc = AuthorizationService(resolver, cache=cache, cache_ttl=60)
    assert await svc.has_role("u1", "Admin") is True
    assert await svc.has_role("u1", "Admin") is True
    resolver.has_role_named.assert_awaited_once_with("u1", "Admin")
    assert cache.data["user:u1:is:Admin"] is True


async def test_has_role_caches_negative_answer(cache) -> None:
    resolver = AsyncMock()
    resolver.has_role_named.return_value = False
    svc = AuthorizationService(resolver, cache=cache)
    assert await svc.has_role("u1", "Admin") is False
    assert await svc.has_role("u1", "Admin") is False
    assert resolver.has_role_named.await_count == 1


async def test_has_role_without_cache_always_resolves() -> None:
    resolver = AsyncMock()
    resolver.has_role_named.return_value = True
    svc = AuthorizationService(resolver, cache=None)
    await svc.has_role("u1", "Admin")
    await svc.has_role("u1", "Admin")
    assert resolver.has_role_named.await_count == 2


async def test_has_capability_maps_to_admin_role(authz) -> None:
    """view-acp, manage-user-roles and edit-users all come from the Admin role."""
    for capability in ("view-acp", "manage-user-roles", "edit-users"):
        assert await authz.has_capability("admin", capability) is True
        assert await authz.has_capability("alice", capability) is False


async def test_unknown_capability_is_denied(authz) -> None:
    assert await authz.has_capability("admin", "launch-rockets") is False


async def test_require_capability_raises(authz) -> None:
    with pytest.raises(AuthorizationException) as exc_info:
        await authz.require_capability("alice", "view-acp")
    assert exc_info.value.error_code == "PERMISSION_DENIED"
    await authz.require_capability("admin", "view-acp")


async def test_invalidate_role_drops_key(authz, cache) -> None:
    """Invalidation deletes the derived key; missing keys are a no-op."""
    await authz.has_role("alice", "Admin")
    assert "user:alice:is:Admin" in cache.data
    assert await authz.invalidate_role("alice", "Admin") is True
    assert "user:alice:is:Admin" not in cache.data
    assert await authz.invalidate_role("alice", "Admin") is True


async def test_invalidate_with_unavailable_cache_reports_not_performed(
    resolver, unavailable_cache
) -> None:
    """Cache down: invalidation is attempted and returns False, never raises."""
    down = unavailable_cache
    svc = AuthorizationService(resolver, cache=down)
    assert await svc.invalidate_role("alice", "Admin") is False
    assert await svc.invalidate_user("alice") is False
    assert down.invalidated == ["user:alice:is:Admin", "user:alice"]
    assert await svc.has_role("admin", "Admin") is True


async def test_invalidate_without_cache_returns_false(resolver) -> None:
    svc = AuthorizationService(resolver, cache=None)
    assert await svc.invalidate_role("alice", "Admin") is False
