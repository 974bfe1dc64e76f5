"""User query service: admin user list and profile page."""

from __future__ import annotations

from acp.application.dtos.user import UserPage, UserProfile
from acp.application.interfaces.repositories import (
    IRoleRepository,
    IUserRepository,
    IUserRoleRepository,
    IUserSettingsRepository,
)
from acp.application.interfaces.services import ICapabilityChecker
from acp.core import messages
from acp.core.constants import CAPABILITY_VIEW_ACP
from acp.domain.exceptions import ResourceNotFoundException


class UserQueryService:
    """Read side for the user screens."""

    def __init__(
        self,
        user_repo: IUserRepository,
        user_settings_repo: IUserSettingsRepository,
        role_repo: IRoleRepository,
        user_role_repo: IUserRoleRepository,
        authz: ICapabilityChecker,
        per_page: int = 25,
    ) -> None:
        self._user_repo = user_repo
        self._user_settings_repo = user_settings_repo
        self._role_repo = role_repo
        self._user_role_repo = user_role_repo
        self._authz = authz
        self._per_page = per_page

    async def list_users(self, actor_id: str, page: int = 1) -> UserPage:
        """One page of users; requires view-acp. Pages below 1 read as 1."""
        await self._authz.require_capability(actor_id, CAPABILITY_VIEW_ACP)
        page = max(1, page)
        skip = (page - 1) * self._per_page
        items = await self._user_repo.list_page(skip, self._per_page)
        total = await self._user_repo.count()
        return UserPage(
            items=tuple(items), page=page, per_page=self._per_page, total=total
        )

    async def get_profile(self, user_id: str) -> UserProfile:
        user = await self._user_repo.get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundException("user", user_id, messages.INVALID_USER)
        held = await self._user_role_repo.get_user_roles(user_id)
        held_ids = {r.id for r in held}
        assignable = [
            r for r in await self._role_repo.list_global() if r.id not in held_ids
        ]
        return UserProfile(
            user=user,
            push_key=await self._user_settings_repo.get_push_key(user_id),
            roles=tuple(held),
            assignable_roles=tuple(assignable),
        )
