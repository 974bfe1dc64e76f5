"""User-facing messages (flash/toast text) for the user and role screens."""

PERMISSION_DENIED = "You do not have permission to do that."
INVALID_USER = "That user does not exist."
INVALID_ROLE = "That role does not exist."
DUPLICATE_ROLE = "The user already has that role."
ROLE_ADD_SUCCESS = "Role added to user."
ROLE_DEL_SUCCESS = "Role removed from user."
REMOVE_ROLE = "Remove Role"
REMOVE_ROLE_TEXT = "Are you sure you want to remove the role {role} from {user}?"
PROFILE_UPDATED = "Profile updated."
NAME_REQUIRED = "A name is required."
PUSH_KEY_INVALID = "The push notification key must be text."


def remove_role_text(user: str, role: str) -> str:
    """Prompt shown before a role is removed from a user."""
    return REMOVE_ROLE_TEXT.format(user=user, role=role)
