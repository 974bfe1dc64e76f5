"""Audit log service: writes to the audit_log table (implements IAuditService)."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from acp.application.dtos.audit_log import AuditLogEntryCreate
from acp.infrastructure.persistence.repositories.audit_log_repo import AuditLogRepository
from acp.shared.enums import AuditAction

logger = logging.getLogger(__name__)


class AuditLogService:
    """Logs who changed what, then appends the row in the caller's transaction."""

    def __init__(self, db: AsyncSession) -> None:
        self._repo = AuditLogRepository(db)

    async def record(
        self,
        actor_id: str | None,
        action: AuditAction,
        resource_type: str,
        resource_id: str | None,
        before: dict[str, Any] | None,
        after: dict[str, Any] | None,
    ) -> None:
        """Append one audit log entry."""
        logger.info(
            "Audit: actor=%s action=%s %s=%s",
            actor_id,
            action.value,
            resource_type,
            resource_id,
        )
        entry = AuditLogEntryCreate(
            actor_id=actor_id,
            action=action.value,
            resource_type=resource_type,
            resource_id=resource_id,
            old_values=before,
            new_values=after,
        )
        await self._repo.create(entry)
