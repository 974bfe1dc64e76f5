"""Repository interfaces (ports) for the application layer.

Implemented by SQLAlchemy repositories in acp.infrastructure.persistence.
Methods return application DTOs or domain values, never ORM objects.
"""

from __future__ import annotations

from typing import Protocol

from acp.application.dtos.contact import TopicResult
from acp.application.dtos.role import RoleResult
from acp.application.dtos.user import UserResult
from acp.domain.preferences import ContactCell


class IUserRepository(Protocol):
    """Users: lookup, paging, profile field updates."""

    async def get_by_id(self, user_id: str) -> UserResult | None: ...

    async def list_page(self, skip: int, limit: int) -> list[UserResult]: ...

    async def count(self) -> int: ...

    async def update_name(self, user_id: str, name: str) -> UserResult: ...


class IUserSettingsRepository(Protocol):
    """Per-user delivery settings (push key)."""

    async def get_push_key(self, user_id: str) -> str | None: ...

    async def save_push_key(self, user_id: str, push_key: str | None) -> None:
        """Create the settings row if missing, then assign push_key."""


class ITopicRepository(Protocol):
    """Canonical topic set (reference data)."""

    async def list_topics(self) -> list[TopicResult]: ...


class IContactSettingRepository(Protocol):
    """ContactSetting rows keyed by (user, topic, mode)."""

    async def list_for_user(self, user_id: str) -> list[ContactCell]: ...

    async def insert_if_absent(self, user_id: str, cell: ContactCell) -> bool:
        """Insert the row; return False if it already existed (incl. a concurrent insert)."""

    async def delete_if_exists(self, user_id: str, cell: ContactCell) -> bool:
        """Delete the row; return False if there was nothing to delete."""


class IRoleRepository(Protocol):
    """Roles (reference data)."""

    async def get_by_id(self, role_id: str) -> RoleResult | None: ...

    async def list_global(self) -> list[RoleResult]: ...


class IUserRoleRepository(Protocol):
    """User-role edges with set semantics."""

    async def get_user_roles(self, user_id: str) -> list[RoleResult]: ...

    async def has_role(self, user_id: str, role_id: str) -> bool: ...

    async def assign(
        self, user_id: str, role_id: str, assigned_by: str | None = None
    ) -> None:
        """Insert the edge; raise DuplicateAssignmentException if it exists."""

    async def remove(self, user_id: str, role_id: str) -> bool:
        """Detach the edge; return False if it was not present."""
