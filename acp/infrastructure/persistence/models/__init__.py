"""Persistence models: ORM entities and mixins."""

from acp.infrastructure.persistence.models.audit_log import AuditLog
from acp.infrastructure.persistence.models.contact import ContactSetting, ContactTopic
from acp.infrastructure.persistence.models.mixins import (
    CuidMixin,
    EntityModel,
    TimestampMixin,
)
from acp.infrastructure.persistence.models.role import Role, UserRole
from acp.infrastructure.persistence.models.user import User, UserSettings

__all__ = [
    "AuditLog",
    "ContactSetting",
    "ContactTopic",
    "CuidMixin",
    "EntityModel",
    "Role",
    "TimestampMixin",
    "User",
    "UserRole",
    "UserSettings",
]
