"""User and UserSettings repositories. Interface methods return application DTOs."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from acp.application.dtos.user import UserResult
from acp.domain.exceptions import ResourceNotFoundException
from acp.infrastructure.persistence.models.user import User, UserSettings
from acp.infrastructure.persistence.repositories.base import BaseRepository


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult."""
    return UserResult(id=u.id, name=u.name, email=u.email, is_active=u.is_active)


class UserRepository(BaseRepository[User]):
    """User lookups, admin paging, and display-name updates."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def get_by_id(self, user_id: str) -> UserResult | None:
        user = await self.get_entity(user_id)
        return _user_to_result(user) if user else None

    async def list_page(self, skip: int, limit: int) -> list[UserResult]:
        users = await self.list_entities(skip, limit, User.name, User.id)
        return [_user_to_result(u) for u in users]

    async def update_name(self, user_id: str, name: str) -> UserResult:
        user = await self.get_entity(user_id)
        if user is None:
            raise ResourceNotFoundException("user", user_id)
        user.name = name
        await self.db.flush()
        return _user_to_result(user)


class UserSettingsRepository:
    """Per-user settings row (created on first save)."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _get(self, user_id: str) -> UserSettings | None:
        result = await self.db.execute(
            select(UserSettings).where(UserSettings.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_push_key(self, user_id: str) -> str | None:
        settings = await self._get(user_id)
        return settings.push_key if settings else None

    async def save_push_key(self, user_id: str, push_key: str | None) -> None:
        settings = await self._get(user_id)
        if settings is None:
            settings = UserSettings(user_id=user_id)
            self.db.add(settings)
        settings.push_key = push_key
        await self.db.flush()
