"""Create tables and seed reference data (contact topics, roles).

Usage:
    python -m scripts.seed_reference_data [admin_user_id]

Local development only; schema migrations are managed outside this service.
Existing topics and roles are left untouched. When admin_user_id is given,
that user is granted the Admin role.
"""

import asyncio
import sys

from sqlalchemy import select

from acp.core.config import get_settings
from acp.core.constants import ADMIN_ROLE_NAME
from acp.infrastructure.persistence import database
from acp.infrastructure.persistence.models import ContactTopic, Role, User, UserRole

TOPICS: list[tuple[str, str]] = [
    ("announcements", "Site announcements and maintenance notices"),
    ("games", "New and updated games in the catalog"),
    ("account", "Changes to your account and roles"),
]

ROLES: list[tuple[str, str, bool]] = [
    (ADMIN_ROLE_NAME, "Full access to the control panel", True),
    ("Developer", "Manages games in the catalog", True),
]


async def main() -> None:
    """Create schema, seed topics and roles, optionally grant Admin."""
    get_settings()
    session_factory = database._ensure_engine()

    async with database.engine.begin() as conn:
        await conn.run_sync(database.Base.metadata.create_all)

    async with session_factory() as session:
        async with session.begin():
            for name, description in TOPICS:
                found = await session.execute(
                    select(ContactTopic.id).where(ContactTopic.name == name)
                )
                if found.first() is None:
                    session.add(ContactTopic(name=name, description=description))
            for name, description, is_global in ROLES:
                found = await session.execute(select(Role.id).where(Role.name == name))
                if found.first() is None:
                    session.add(
                        Role(name=name, description=description, is_global=is_global)
                    )
            await session.flush()

            if len(sys.argv) > 1:
                user_id = sys.argv[1]
                if await session.get(User, user_id) is None:
                    print(f"User not found: {user_id}", file=sys.stderr)
                    sys.exit(1)
                admin = (
                    await session.execute(select(Role).where(Role.name == ADMIN_ROLE_NAME))
                ).scalar_one()
                held = await session.execute(
                    select(UserRole.id).where(
                        UserRole.user_id == user_id, UserRole.role_id == admin.id
                    )
                )
                if held.first() is None:
                    session.add(UserRole(user_id=user_id, role_id=admin.id))
                print(f"Granted {ADMIN_ROLE_NAME} to {user_id}")

    print(f"Seeded {len(TOPICS)} topics and {len(ROLES)} roles")
    await database.dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
