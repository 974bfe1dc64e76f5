"""ContactSetting repository: per-cell insert-if-absent and delete-if-exists.

Each write runs in its own savepoint so a unique-constraint loss to a
concurrent identical insert leaves the request transaction usable.
"""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from acp.domain.enums import ContactMode
from acp.domain.preferences import ContactCell
from acp.infrastructure.persistence.models.contact import ContactSetting


class ContactSettingRepository:
    """ContactSetting rows for one user at a time."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_for_user(self, user_id: str) -> list[ContactCell]:
        """Stored cells for user; rows with a mode outside ContactMode are skipped."""
        result = await self.db.execute(
            select(ContactSetting.topic, ContactSetting.mode).where(
                ContactSetting.user_id == user_id
            )
        )
        cells: list[ContactCell] = []
        for topic, raw_mode in result.all():
            mode = ContactMode.parse(raw_mode)
            if mode is not None:
                cells.append(ContactCell(topic, mode))
        return cells

    async def exists(self, user_id: str, cell: ContactCell) -> bool:
        result = await self.db.execute(
            select(ContactSetting.id).where(
                ContactSetting.user_id == user_id,
                ContactSetting.topic == cell.topic,
                ContactSetting.mode == cell.mode.value,
            )
        )
        return result.first() is not None

    async def insert_if_absent(self, user_id: str, cell: ContactCell) -> bool:
        if await self.exists(user_id, cell):
            return False
        try:
            async with self.db.begin_nested():
                self.db.add(
                    ContactSetting(user_id=user_id, topic=cell.topic, mode=cell.mode.value)
                )
        except IntegrityError:
            # Lost the race to an identical insert; the row exists, which is what we want.
            return False
        return True

    async def delete_if_exists(self, user_id: str, cell: ContactCell) -> bool:
        async with self.db.begin_nested():
            result = await self.db.execute(
                delete(ContactSetting).where(
                    ContactSetting.user_id == user_id,
                    ContactSetting.topic == cell.topic,
                    ContactSetting.mode == cell.mode.value,
                )
            )
        return (result.rowcount or 0) > 0
