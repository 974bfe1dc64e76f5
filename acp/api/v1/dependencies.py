"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions and application services.
Services are built from infrastructure implementations here; routes depend
only on these dependencies, not on infra directly. Read endpoints use
get_db; write endpoints use get_db_transactional so every repository and
the audit writer share one transaction, and cache invalidation registered
through SessionCommitHooks runs after it commits.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from acp.application.dtos.user import UserResult
from acp.application.interfaces.services import ICacheService
from acp.application.services import (
    AuthorizationService,
    ContactPreferenceService,
    RoleManagementService,
    UserQueryService,
)
from acp.core.config import get_settings
from acp.infrastructure.persistence.database import (
    SessionCommitHooks,
    get_db,
    get_db_transactional,
)
from acp.infrastructure.persistence.repositories import (
    ContactSettingRepository,
    RoleRepository,
    TopicRepository,
    UserRepository,
    UserRoleRepository,
    UserSettingsRepository,
)
from acp.infrastructure.security.jwt import verify_token
from acp.infrastructure.services import AuditLogService, RoleResolver

_http_bearer = HTTPBearer(auto_error=False)


def get_cache(request: Request) -> ICacheService | None:
    """Cache set in app lifespan (app.state.cache); None when Redis is disabled."""
    return getattr(request.app.state, "cache", None)


def _build_authz(db: AsyncSession, cache: ICacheService | None) -> AuthorizationService:
    return AuthorizationService(
        role_resolver=RoleResolver(db),
        cache=cache,
        cache_ttl=get_settings().cache_ttl_roles,
    )


# ---- Principal ----


async def get_user_repo(db: Annotated[AsyncSession, Depends(get_db)]) -> UserRepository:
    return UserRepository(db)


async def get_current_user_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> UserResult | None:
    """Return current user from JWT if present; else None."""
    if not credentials:
        return None
    try:
        payload = verify_token(credentials.credentials)
    except ValueError:
        return None
    user_id = payload.get("sub")
    if not user_id:
        return None
    user = await user_repo.get_by_id(user_id)
    if not user or not user.is_active:
        return None
    return user


async def get_current_user(
    current_user: Annotated[UserResult | None, Depends(get_current_user_optional)],
) -> UserResult:
    """Return current user from JWT; raise 401 if missing or invalid."""
    if current_user is None:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_user


# ---- Read-side services (get_db) ----


async def get_authorization_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    cache: Annotated[ICacheService | None, Depends(get_cache)],
) -> AuthorizationService:
    """AuthorizationService with DB role resolver and optional cache."""
    return _build_authz(db, cache)


async def get_user_query_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    authz: Annotated[AuthorizationService, Depends(get_authorization_service)],
) -> UserQueryService:
    return UserQueryService(
        user_repo=UserRepository(db),
        user_settings_repo=UserSettingsRepository(db),
        role_repo=RoleRepository(db),
        user_role_repo=UserRoleRepository(db),
        authz=authz,
        per_page=get_settings().users_per_page,
    )


async def get_preference_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    authz: Annotated[AuthorizationService, Depends(get_authorization_service)],
) -> ContactPreferenceService:
    """Preference service on a read session (edit form)."""
    return _build_preference_service(db, authz)


# ---- Write-side services (get_db_transactional) ----


async def get_authorization_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    cache: Annotated[ICacheService | None, Depends(get_cache)],
) -> AuthorizationService:
    return _build_authz(db, cache)


def _build_preference_service(
    db: AsyncSession,
    authz: AuthorizationService,
    hooks: SessionCommitHooks | None = None,
) -> ContactPreferenceService:
    return ContactPreferenceService(
        user_repo=UserRepository(db),
        user_settings_repo=UserSettingsRepository(db),
        topic_repo=TopicRepository(db),
        contact_setting_repo=ContactSettingRepository(db),
        authz=authz,
        audit=AuditLogService(db),
        hooks=hooks,
    )


async def get_preference_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    authz: Annotated[AuthorizationService, Depends(get_authorization_service_for_write)],
) -> ContactPreferenceService:
    """Preference service for reconcile; cache invalidation waits for the commit."""
    return _build_preference_service(db, authz, SessionCommitHooks(db))


async def get_role_management_service(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    authz: Annotated[AuthorizationService, Depends(get_authorization_service_for_write)],
) -> RoleManagementService:
    """Role grant/revoke service; cache invalidation waits for the commit."""
    return RoleManagementService(
        user_repo=UserRepository(db),
        role_repo=RoleRepository(db),
        user_role_repo=UserRoleRepository(db),
        authz=authz,
        audit=AuditLogService(db),
        hooks=SessionCommitHooks(db),
    )
