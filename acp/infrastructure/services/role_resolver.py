"""Resolves role membership from DB (implements IRoleResolver)."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from acp.infrastructure.persistence.models.role import Role, UserRole


class RoleResolver:
    """Authoritative answer to 'does user hold role <name>?'."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def has_role_named(self, user_id: str, role_name: str) -> bool:
        query = (
            select(UserRole.id)
            .join(Role, Role.id == UserRole.role_id)
            .where(UserRole.user_id == user_id, Role.name == role_name)
            .limit(1)
        )
        result = await self.db.execute(query)
        return result.first() is not None
