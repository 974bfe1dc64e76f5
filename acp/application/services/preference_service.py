"""Contact preference service: reconcile a user's topic x mode subscriptions.

The submission is the complete desired state. The diff is computed in the
domain layer (acp.domain.preferences); this service authorizes, audits, then
applies each cell write through the repository, which isolates it in its own
savepoint. Profile fields are saved in the same transaction afterwards, and
the cached user entry is dropped once that transaction commits.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Any

from acp.application.dtos.contact import PreferenceForm, ReconcileResult
from acp.application.dtos.user import ProfileUpdate, UserResult
from acp.application.interfaces.repositories import (
    IContactSettingRepository,
    ITopicRepository,
    IUserRepository,
    IUserSettingsRepository,
)
from acp.application.interfaces.services import (
    IAuditService,
    ICapabilityChecker,
    ITransactionHooks,
)
from acp.application.services.after_commit import after_commit
from acp.core import messages
from acp.core.constants import CAPABILITY_EDIT_USERS
from acp.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)
from acp.domain.preferences import (
    PreferenceMatrix,
    build_preference_matrix,
    compute_contact_diff,
    matrix_to_lists,
    selected_cells,
)
from acp.shared.enums import AuditAction

logger = logging.getLogger(__name__)


def _validate_profile(profile: ProfileUpdate) -> str:
    """Return the stripped name; raise ValidationException on bad fields."""
    if not isinstance(profile.name, str) or not profile.name.strip():
        raise ValidationException(messages.NAME_REQUIRED, field="name")
    if profile.push_key is not None and not isinstance(profile.push_key, str):
        raise ValidationException(messages.PUSH_KEY_INVALID, field="push_key")
    return profile.name.strip()


class ContactPreferenceService:
    """Edit screen data and reconciliation of ContactSetting rows."""

    def __init__(
        self,
        user_repo: IUserRepository,
        user_settings_repo: IUserSettingsRepository,
        topic_repo: ITopicRepository,
        contact_setting_repo: IContactSettingRepository,
        authz: ICapabilityChecker,
        audit: IAuditService,
        hooks: ITransactionHooks | None = None,
    ) -> None:
        self._user_repo = user_repo
        self._user_settings_repo = user_settings_repo
        self._topic_repo = topic_repo
        self._contact_setting_repo = contact_setting_repo
        self._authz = authz
        self._audit = audit
        self._hooks = hooks

    async def _authorize(self, actor_id: str, user_id: str) -> None:
        """Users may edit themselves; editing others needs edit-users."""
        if actor_id == user_id:
            return
        if not await self._authz.has_capability(actor_id, CAPABILITY_EDIT_USERS):
            raise AuthorizationException(capability=CAPABILITY_EDIT_USERS)

    async def _load_user(self, user_id: str) -> UserResult:
        user = await self._user_repo.get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundException("user", user_id, messages.INVALID_USER)
        return user

    async def get_preference_matrix(self, actor_id: str, user_id: str) -> PreferenceForm:
        """Every canonical topic x mode, marked with the user's stored state."""
        await self._authorize(actor_id, user_id)
        user = await self._load_user(user_id)
        topics = tuple(await self._topic_repo.list_topics())
        existing = await self._contact_setting_repo.list_for_user(user_id)
        push_key = await self._user_settings_repo.get_push_key(user_id)
        return PreferenceForm(
            user=user,
            push_key=push_key,
            topics=topics,
            matrix=build_preference_matrix([t.name for t in topics], existing),
        )

    async def reconcile(
        self,
        actor_id: str,
        user_id: str,
        submitted: PreferenceMatrix,
        profile: ProfileUpdate,
    ) -> ReconcileResult:
        """Make stored ContactSetting rows equal submitted, then save profile fields.

        Raises:
            AuthorizationException: actor is neither the user nor an editor.
            ResourceNotFoundException: user does not exist.
            ValidationException: name blank or push_key not text.
        """
        await self._authorize(actor_id, user_id)
        user = await self._load_user(user_id)
        name = _validate_profile(profile)

        topic_names = [t.name for t in await self._topic_repo.list_topics()]
        existing = await self._contact_setting_repo.list_for_user(user_id)
        push_key = await self._user_settings_repo.get_push_key(user_id)
        diff = compute_contact_diff(topic_names, existing, submitted)

        before: dict[str, Any] = {
            "name": user.name,
            "push_key": push_key,
            "notifications": matrix_to_lists(
                build_preference_matrix(topic_names, existing)
            ),
        }
        after: dict[str, Any] = {
            "name": name,
            "push_key": profile.push_key,
            "notifications": matrix_to_lists(
                build_preference_matrix(
                    topic_names, selected_cells(topic_names, submitted)
                )
            ),
        }
        logger.info("[User Update] id=%s original=%s new=%s", user_id, before, after)
        await self._audit.record(
            actor_id, AuditAction.UPDATED, "user", user_id, before, after
        )

        for cell in diff.to_insert:
            await self._contact_setting_repo.insert_if_absent(user_id, cell)
        for cell in diff.to_delete:
            await self._contact_setting_repo.delete_if_exists(user_id, cell)

        updated = await self._user_repo.update_name(user_id, name)
        await self._user_settings_repo.save_push_key(user_id, profile.push_key)

        await after_commit(self._hooks, partial(self._authz.invalidate_user, user_id))
        logger.info(
            "[User Update] id=%s success (inserted=%d deleted=%d)",
            user_id,
            len(diff.to_insert),
            len(diff.to_delete),
        )
        return ReconcileResult(user=updated, push_key=profile.push_key, diff=diff)
