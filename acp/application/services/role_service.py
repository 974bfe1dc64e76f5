"""Role management service: grant and two-step revoke of user roles.

Every mutation drops the derived role fact user:<id>:is:<role> once its
transaction has committed, so the next gate check recomputes it from
committed state. Step one of a revoke drops it immediately.
"""

from __future__ import annotations

import logging
from functools import partial

from acp.application.dtos.role import (
    ConfirmationAction,
    RevocationConfirmation,
    RevocationResult,
    RoleResult,
    UserRoleResult,
)
from acp.application.dtos.user import UserResult
from acp.application.interfaces.repositories import (
    IRoleRepository,
    IUserRepository,
    IUserRoleRepository,
)
from acp.application.interfaces.services import (
    IAuditService,
    ICapabilityChecker,
    ITransactionHooks,
)
from acp.application.services.after_commit import after_commit
from acp.core import messages
from acp.core.constants import (
    ACTION_PROFILE,
    ACTION_REMOVE_ROLE_CONFIRM,
    CAPABILITY_MANAGE_USER_ROLES,
)
from acp.domain.exceptions import DuplicateAssignmentException, ResourceNotFoundException
from acp.shared.enums import AuditAction

logger = logging.getLogger(__name__)


class RoleManagementService:
    """Grant/revoke roles, gated by manage-user-roles."""

    def __init__(
        self,
        user_repo: IUserRepository,
        role_repo: IRoleRepository,
        user_role_repo: IUserRoleRepository,
        authz: ICapabilityChecker,
        audit: IAuditService,
        hooks: ITransactionHooks | None = None,
    ) -> None:
        self._user_repo = user_repo
        self._role_repo = role_repo
        self._user_role_repo = user_role_repo
        self._authz = authz
        self._audit = audit
        self._hooks = hooks

    async def _resolve(self, user_id: str, role_id: str) -> tuple[UserResult, RoleResult]:
        user = await self._user_repo.get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundException("user", user_id, messages.INVALID_USER)
        role = await self._role_repo.get_by_id(role_id)
        if role is None:
            raise ResourceNotFoundException("role", role_id, messages.INVALID_ROLE)
        return user, role

    async def grant_role(
        self, actor_id: str, user_id: str, role_id: str
    ) -> UserRoleResult:
        """Attach role to user.

        Raises:
            AuthorizationException: actor lacks manage-user-roles.
            ResourceNotFoundException: user or role missing.
            DuplicateAssignmentException: user already holds the role.
        """
        await self._authz.require_capability(actor_id, CAPABILITY_MANAGE_USER_ROLES)
        user, role = await self._resolve(user_id, role_id)
        if await self._user_role_repo.has_role(user.id, role.id):
            raise DuplicateAssignmentException(
                messages.DUPLICATE_ROLE,
                assignment_type="user_role",
                details_extra={"user_id": user.id, "role_id": role.id},
            )
        await self._user_role_repo.assign(user.id, role.id, assigned_by=actor_id)
        await self._audit.record(
            actor_id,
            AuditAction.ASSIGNED,
            "user_role",
            user.id,
            None,
            {"role_id": role.id, "role_name": role.name},
        )
        await after_commit(
            self._hooks, partial(self._authz.invalidate_role, user.id, role.name)
        )
        logger.info("Role %s granted to user %s by %s", role.name, user.id, actor_id)
        return UserRoleResult(
            user_id=user.id,
            role_id=role.id,
            role_name=role.name,
            assigned_by=actor_id,
        )

    async def describe_revocation(
        self, actor_id: str, user_id: str, role_id: str
    ) -> RevocationConfirmation:
        """Step one: confirmation descriptor. Mutates nothing but the cache."""
        await self._authz.require_capability(actor_id, CAPABILITY_MANAGE_USER_ROLES)
        user, role = await self._resolve(user_id, role_id)
        await self._authz.invalidate_role(user.id, role.name)
        return RevocationConfirmation(
            header=messages.REMOVE_ROLE,
            body=messages.remove_role_text(user.name, role.name),
            user_id=user.id,
            role_id=role.id,
            role_name=role.name,
            confirm=ConfirmationAction(
                ACTION_REMOVE_ROLE_CONFIRM, {"user_id": user.id, "role_id": role.id}
            ),
            cancel=ConfirmationAction(ACTION_PROFILE, {"user_id": user.id}),
        )

    async def confirm_revocation(
        self, actor_id: str, user_id: str, role_id: str
    ) -> RevocationResult:
        """Step two: detach the edge. Absent edge is a no-op (removed=False)."""
        await self._authz.require_capability(actor_id, CAPABILITY_MANAGE_USER_ROLES)
        user, role = await self._resolve(user_id, role_id)
        removed = await self._user_role_repo.remove(user.id, role.id)
        await self._audit.record(
            actor_id,
            AuditAction.UNASSIGNED,
            "user_role",
            user.id,
            {"role_id": role.id, "role_name": role.name} if removed else None,
            None,
        )
        await after_commit(
            self._hooks, partial(self._authz.invalidate_role, user.id, role.name)
        )
        logger.info(
            "Role %s revoked from user %s by %s (removed=%s)",
            role.name,
            user.id,
            actor_id,
            removed,
        )
        return RevocationResult(
            user_id=user.id, role_id=role.id, role_name=role.name, removed=removed
        )
