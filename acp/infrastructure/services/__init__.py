"""Infrastructure implementations of application service interfaces."""

from acp.infrastructure.services.audit_log_service import AuditLogService
from acp.infrastructure.services.role_resolver import RoleResolver

__all__ = [
    "AuditLogService",
    "RoleResolver",
]
