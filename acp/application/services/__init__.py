"""Application services (use cases over repository and service ports)."""

from acp.application.services.authorization_service import AuthorizationService
from acp.application.services.preference_service import ContactPreferenceService
from acp.application.services.role_service import RoleManagementService
from acp.application.services.user_service import UserQueryService

__all__ = [
    "AuthorizationService",
    "ContactPreferenceService",
    "RoleManagementService",
    "UserQueryService",
]
