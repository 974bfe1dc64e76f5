"""Audit log ORM model. Append-only record of who changed what."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Connection, DateTime, String, event, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, Mapper, mapped_column

from acp.infrastructure.persistence.database import Base
from acp.shared.utils.generators import generate_cuid

_JsonType = JSON().with_variant(JSONB(), "postgresql")


class AuditLog(Base):
    """Audit log entry: actor, action, target, before/after. No update/delete."""

    __tablename__ = "audit_log"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=generate_cuid)
    actor_id: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
    action: Mapped[str] = mapped_column(String, nullable=False)
    resource_type: Mapped[str] = mapped_column(String, nullable=False)
    resource_id: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
    old_values: Mapped[dict[str, Any] | None] = mapped_column(_JsonType, nullable=True)
    new_values: Mapped[dict[str, Any] | None] = mapped_column(_JsonType, nullable=True)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP"), nullable=False
    )


@event.listens_for(AuditLog, "before_update")
def _prevent_audit_log_updates(
    _mapper: Mapper[Any], _connection: Connection, _target: AuditLog
) -> None:
    """Audit log entries are append-only; updates are forbidden."""
    raise ValueError("Audit log entries are immutable and cannot be updated.")


@event.listens_for(AuditLog, "before_delete")
def _prevent_audit_log_deletes(
    _mapper: Mapper[Any], _connection: Connection, _target: AuditLog
) -> None:
    """Audit log entries cannot be deleted."""
    raise ValueError("Audit log entries cannot be deleted.")
