"""Topic repository (canonical notification topics)."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from acp.application.dtos.contact import TopicResult
from acp.infrastructure.persistence.models.contact import ContactTopic


class TopicRepository:
    """Read-only access to ContactTopic reference data."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_topics(self) -> list[TopicResult]:
        result = await self.db.execute(select(ContactTopic).order_by(ContactTopic.name))
        return [
            TopicResult(id=t.id, name=t.name, description=t.description)
            for t in result.scalars().all()
        ]
