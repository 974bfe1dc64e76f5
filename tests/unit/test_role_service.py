"""Unit tests for RoleManagementService (grant, two-step revoke, cache invalidation)."""

import pytest

from acp.application.services import RoleManagementService
from acp.domain.enums import RevocationState
from acp.domain.exceptions import (
    AuthorizationException,
    DuplicateAssignmentException,
    ResourceNotFoundException,
)
from acp.shared.enums import AuditAction


@pytest.fixture
def svc(repos, authz, audit) -> RoleManagementService:
    return RoleManagementService(
        user_repo=repos["user_repo"],
        role_repo=repos["role_repo"],
        user_role_repo=repos["user_role_repo"],
        authz=authz,
        audit=audit,
    )


async def test_grant_role_attaches_and_invalidates(svc, store, cache, audit) -> None:
    """Grant Developer to alice: edge exists, audit recorded, user:alice:is:Developer dropped."""
    cache.data["user:alice:is:Developer"] = False
    result = await svc.grant_role("admin", "alice", "r-dev")
    assert ("alice", "r-dev") in store.edges
    assert result.role_name == "Developer"
    assert result.assigned_by == "admin"
    assert "user:alice:is:Developer" in cache.invalidated
    assert "user:alice:is:Developer" not in cache.data
    assert audit.entries[-1]["action"] == AuditAction.ASSIGNED


async def test_grant_role_twice_raises_duplicate(svc, store, cache) -> None:
    """Second grant of the same role is rejected; exactly one edge remains."""
    await svc.grant_role("admin", "alice", "r-dev")
    cache.invalidated.clear()
    with pytest.raises(DuplicateAssignmentException) as exc_info:
        await svc.grant_role("admin", "alice", "r-dev")
    assert exc_info.value.error_code == "DUPLICATE_ASSIGNMENT"
    assert [e for e in store.edges if e == ("alice", "r-dev")] == [("alice", "r-dev")]
    assert cache.invalidated == []


async def test_grant_role_without_capability_denied(svc, store, cache) -> None:
    """Non-admin cannot grant; nothing mutated or invalidated."""
    with pytest.raises(AuthorizationException) as exc_info:
        await svc.grant_role("bob", "alice", "r-dev")
    assert exc_info.value.details == {"capability": "manage-user-roles"}
    assert ("alice", "r-dev") not in store.edges
    assert cache.invalidated == []


async def test_grant_role_unknown_user_or_role_not_found(svc, cache) -> None:
    with pytest.raises(ResourceNotFoundException) as user_exc:
        await svc.grant_role("admin", "ghost", "r-dev")
    assert user_exc.value.details["resource_type"] == "user"
    with pytest.raises(ResourceNotFoundException) as role_exc:
        await svc.grant_role("admin", "alice", "r-missing")
    assert role_exc.value.details["resource_type"] == "role"
    assert cache.invalidated == []


async def test_grant_then_gate_sees_new_role(svc, authz) -> None:
    """A cached negative role fact does not survive a grant."""
    assert await authz.has_role("alice", "Admin") is False
    await svc.grant_role("admin", "alice", "r-admin")
    assert await authz.has_role("alice", "Admin") is True


async def test_describe_revocation_mutates_nothing_and_invalidates(svc, store, cache) -> None:
    """Step one returns the prompt and actions, leaves the edge, drops the cache key."""
    store.grant("alice", "r-dev")
    desc = await svc.describe_revocation("admin", "alice", "r-dev")
    assert ("alice", "r-dev") in store.edges
    assert desc.state == RevocationState.PENDING
    assert desc.header == "Remove Role"
    assert desc.body == "Are you sure you want to remove the role Developer from Alice?"
    assert desc.confirm.name == "remove-role-confirm"
    assert desc.confirm.params == {"user_id": "alice", "role_id": "r-dev"}
    assert desc.cancel.name == "profile"
    assert desc.cancel.params == {"user_id": "alice"}
    assert cache.invalidated == ["user:alice:is:Developer"]
    assert not [w for w in store.writes if w[0] == "remove"]


async def test_confirm_revocation_detaches_and_invalidates(svc, store, cache, audit) -> None:
    """Step two removes the edge, audits, and invalidates again."""
    store.grant("alice", "r-dev")
    await svc.describe_revocation("admin", "alice", "r-dev")
    result = await svc.confirm_revocation("admin", "alice", "r-dev")
    assert result.removed is True
    assert result.state == RevocationState.APPLIED
    assert ("alice", "r-dev") not in store.edges
    assert cache.invalidated == ["user:alice:is:Developer", "user:alice:is:Developer"]
    assert audit.entries[-1]["action"] == AuditAction.UNASSIGNED


async def test_confirm_revocation_absent_edge_is_noop(svc, store, cache) -> None:
    """Revoking a role the user does not hold succeeds with removed=False, still invalidates."""
    result = await svc.confirm_revocation("admin", "alice", "r-dev")
    assert result.removed is False
    assert "user:alice:is:Developer" in cache.invalidated


async def test_revocation_steps_without_capability_denied(svc, store, cache) -> None:
    """Both steps are gated; unauthorized calls mutate and invalidate nothing."""
    store.grant("alice", "r-dev")
    with pytest.raises(AuthorizationException):
        await svc.describe_revocation("bob", "alice", "r-dev")
    with pytest.raises(AuthorizationException):
        await svc.confirm_revocation("bob", "alice", "r-dev")
    assert ("alice", "r-dev") in store.edges
    assert cache.invalidated == []


async def test_revocation_unknown_role_not_found(svc, cache) -> None:
    with pytest.raises(ResourceNotFoundException):
        await svc.describe_revocation("admin", "alice", "r-missing")
    with pytest.raises(ResourceNotFoundException):
        await svc.confirm_revocation("admin", "alice", "r-missing")
    assert cache.invalidated == []


async def test_revoke_then_gate_loses_role(svc, store, authz) -> None:
    """A cached positive role fact does not survive a revoke."""
    store.grant("alice", "r-admin")
    assert await authz.has_capability("alice", "edit-users") is True
    await svc.confirm_revocation("admin", "alice", "r-admin")
    assert await authz.has_capability("alice", "edit-users") is False


@pytest.fixture
def svc_tx(repos, authz, audit, hooks) -> RoleManagementService:
    """Service inside a write transaction that has not committed yet."""
    return RoleManagementService(
        user_repo=repos["user_repo"],
        role_repo=repos["role_repo"],
        user_role_repo=repos["user_role_repo"],
        authz=authz,
        audit=audit,
        hooks=hooks,
    )


async def test_grant_role_invalidates_after_commit(svc_tx, store, cache, hooks) -> None:
    """The edge is written at once; the cached fact is dropped only on commit."""
    cache.data["user:alice:is:Developer"] = False
    await svc_tx.grant_role("admin", "alice", "r-dev")
    assert ("alice", "r-dev") in store.edges
    assert cache.invalidated == []
    await hooks.commit()
    assert cache.invalidated == ["user:alice:is:Developer"]
    assert "user:alice:is:Developer" not in cache.data


async def test_gate_check_before_commit_does_not_outlive_revoke(
    svc_tx, store, cache, authz, hooks
) -> None:
    """A gate check between the edge delete and the commit caches the old fact;
    the commit drops it, so alice loses edit-users as soon as the revoke lands."""
    store.grant("alice", "r-admin")
    await svc_tx.describe_revocation("admin", "alice", "r-admin")
    assert cache.invalidated == ["user:alice:is:Admin"]

    await svc_tx.confirm_revocation("admin", "alice", "r-admin")
    # A concurrent request still sees the committed edge and caches it.
    cache.data["user:alice:is:Admin"] = True
    assert await authz.has_capability("alice", "edit-users") is True

    await hooks.commit()
    assert cache.invalidated == ["user:alice:is:Admin", "user:alice:is:Admin"]
    assert await authz.has_capability("alice", "edit-users") is False


async def test_failed_transaction_never_invalidates(svc_tx, cache, hooks) -> None:
    """A grant that raises registers nothing to run after commit."""
    with pytest.raises(DuplicateAssignmentException):
        await svc_tx.grant_role("admin", "admin", "r-admin")
    assert hooks.pending == []
    assert cache.invalidated == []


async def test_grant_role_name_with_separator(svc, store, cache, authz) -> None:
    """Role names may contain ':'; the grant succeeds and drops the verbatim key."""
    store.add_role("r-gl", "Guild:Leader")
    cache.data["user:alice:is:Guild:Leader"] = False
    result = await svc.grant_role("admin", "alice", "r-gl")
    assert result.role_name == "Guild:Leader"
    assert cache.invalidated == ["user:alice:is:Guild:Leader"]
    assert await authz.has_role("alice", "Guild:Leader") is True
