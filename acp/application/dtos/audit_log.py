"""DTOs for the audit log."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class AuditLogEntryCreate:
    """Input for appending one audit log entry."""

    actor_id: str | None
    action: str
    resource_type: str
    resource_id: str | None
    old_values: dict[str, Any] | None = None
    new_values: dict[str, Any] | None = None


@dataclass(frozen=True)
class AuditLogResult:
    """Audit log entry read-model."""

    id: str
    actor_id: str | None
    action: str
    resource_type: str
    resource_id: str | None
    old_values: dict[str, Any] | None
    new_values: dict[str, Any] | None
    timestamp: datetime
