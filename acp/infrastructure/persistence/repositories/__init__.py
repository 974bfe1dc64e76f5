"""Persistence repositories. Re-exports for dependency injection."""

from acp.infrastructure.persistence.repositories.audit_log_repo import AuditLogRepository
from acp.infrastructure.persistence.repositories.base import BaseRepository
from acp.infrastructure.persistence.repositories.contact_setting_repo import (
    ContactSettingRepository,
)
from acp.infrastructure.persistence.repositories.role_repo import RoleRepository
from acp.infrastructure.persistence.repositories.topic_repo import TopicRepository
from acp.infrastructure.persistence.repositories.user_repo import (
    UserRepository,
    UserSettingsRepository,
)
from acp.infrastructure.persistence.repositories.user_role_repo import (
    UserRoleRepository,
)

__all__ = [
    "AuditLogRepository",
    "BaseRepository",
    "ContactSettingRepository",
    "RoleRepository",
    "TopicRepository",
    "UserRepository",
    "UserRoleRepository",
    "UserSettingsRepository",
]
