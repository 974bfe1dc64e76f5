"""UserRole repository: user-role edges (single entity responsibility)."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from acp.application.dtos.role import RoleResult
from acp.core import messages
from acp.domain.exceptions import DuplicateAssignmentException
from acp.infrastructure.persistence.models.role import Role, UserRole
from acp.infrastructure.persistence.repositories.role_repo import _role_to_result


class UserRoleRepository:
    """User-role link table only. Assign/remove and membership checks."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_user_roles(self, user_id: str) -> list[RoleResult]:
        result = await self.db.execute(
            select(Role)
            .join(UserRole, UserRole.role_id == Role.id)
            .where(UserRole.user_id == user_id)
            .order_by(Role.name)
        )
        return [_role_to_result(r) for r in result.scalars().all()]

    async def has_role(self, user_id: str, role_id: str) -> bool:
        result = await self.db.execute(
            select(UserRole.id).where(
                UserRole.user_id == user_id, UserRole.role_id == role_id
            )
        )
        return result.first() is not None

    async def assign(
        self, user_id: str, role_id: str, assigned_by: str | None = None
    ) -> None:
        """Insert the edge. The unique constraint is the final guard against a concurrent grant."""
        try:
            async with self.db.begin_nested():
                self.db.add(
                    UserRole(user_id=user_id, role_id=role_id, assigned_by=assigned_by)
                )
        except IntegrityError:
            raise DuplicateAssignmentException(
                messages.DUPLICATE_ROLE,
                assignment_type="user_role",
                details_extra={"user_id": user_id, "role_id": role_id},
            ) from None

    async def remove(self, user_id: str, role_id: str) -> bool:
        result = await self.db.execute(
            delete(UserRole).where(
                UserRole.user_id == user_id, UserRole.role_id == role_id
            )
        )
        await self.db.flush()
        return (result.rowcount or 0) > 0
