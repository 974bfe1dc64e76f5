"""Shared enumerations (audit actions).

Domain-specific enums (ContactMode, RevocationState) live in acp.domain.enums.
"""

from enum import Enum


class AuditAction(str, Enum):
    """Audit action types recorded in the audit log."""

    UPDATED = "updated"
    ASSIGNED = "assigned"
    UNASSIGNED = "unassigned"
