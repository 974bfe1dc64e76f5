"""Audit log repository. Append-only."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from acp.application.dtos.audit_log import AuditLogEntryCreate, AuditLogResult
from acp.infrastructure.persistence.models.audit_log import AuditLog
from acp.shared.utils.generators import generate_cuid


def _orm_to_result(row: AuditLog) -> AuditLogResult:
    """Map ORM to application DTO."""
    return AuditLogResult(
        id=row.id,
        actor_id=row.actor_id,
        action=row.action,
        resource_type=row.resource_type,
        resource_id=row.resource_id,
        old_values=row.old_values,
        new_values=row.new_values,
        timestamp=row.timestamp,
    )


class AuditLogRepository:
    """Append-only audit log repository. No update/delete."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create(self, entry: AuditLogEntryCreate) -> AuditLogResult:
        """Append one audit log entry; return created record."""
        row = AuditLog(
            id=generate_cuid(),
            actor_id=entry.actor_id,
            action=entry.action,
            resource_type=entry.resource_type,
            resource_id=entry.resource_id,
            old_values=entry.old_values,
            new_values=entry.new_values,
        )
        self.db.add(row)
        await self.db.flush()
        await self.db.refresh(row)
        return _orm_to_result(row)