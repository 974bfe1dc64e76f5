"""Base repository: generic reads over one ORM model."""

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from acp.infrastructure.persistence.database import Base


class BaseRepository[ModelType: Base]:
    """Base repository with get_entity, list_entities, count."""

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_entity(self, entity_id: str) -> ModelType | None:
        """Return a single ORM record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def list_entities(
        self, skip: int = 0, limit: int = 100, *order_by: Any
    ) -> list[ModelType]:
        """Return ORM records with pagination."""
        q = select(self.model)
        if order_by:
            q = q.order_by(*order_by)
        result = await self.db.execute(q.offset(skip).limit(limit))
        return list(result.scalars().all())

    async def count(self) -> int:
        """Return total number of records."""
        result = await self.db.execute(select(func.count()).select_from(self.model))
        return int(result.scalar_one())
