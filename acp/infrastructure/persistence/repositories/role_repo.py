"""Role repository. Read methods return RoleResult (DTO)."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from acp.application.dtos.role import RoleResult
from acp.infrastructure.persistence.models.role import Role
from acp.infrastructure.persistence.repositories.base import BaseRepository


def _role_to_result(r: Role) -> RoleResult:
    """Map ORM Role to application RoleResult."""
    return RoleResult(
        id=r.id,
        name=r.name,
        description=r.description,
        is_global=r.is_global,
    )


class RoleRepository(BaseRepository[Role]):
    """Roles are reference data; this service only reads them."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Role)

    async def get_by_id(self, role_id: str) -> RoleResult | None:
        role = await self.get_entity(role_id)
        return _role_to_result(role) if role else None

    async def list_global(self) -> list[RoleResult]:
        result = await self.db.execute(
            select(Role).where(Role.is_global.is_(True)).order_by(Role.name)
        )
        return [_role_to_result(r) for r in result.scalars().all()]
