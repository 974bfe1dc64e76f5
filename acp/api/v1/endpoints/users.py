"""Users API: admin list, profile, and contact preference edit/save."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from acp.api.v1.dependencies import (
    get_current_user,
    get_preference_service,
    get_preference_service_for_write,
    get_user_query_service,
)
from acp.application.dtos.user import ProfileUpdate, UserResult
from acp.application.services import ContactPreferenceService, UserQueryService
from acp.core import messages
from acp.core.limiter import limit_writes
from acp.schemas.role import RoleResponse
from acp.schemas.user import (
    PreferenceFormResponse,
    ProfileUpdateRequest,
    ProfileUpdateResponse,
    TopicResponse,
    UserListResponse,
    UserProfileResponse,
    UserResponse,
)

router = APIRouter()


@router.get("", response_model=UserListResponse)
async def list_users(
    current_user: Annotated[UserResult, Depends(get_current_user)],
    svc: Annotated[UserQueryService, Depends(get_user_query_service)],
    page: Annotated[int, Query()] = 1,
):
    """List users, paged. Requires view-acp."""
    result = await svc.list_users(current_user.id, page)
    return UserListResponse(
        items=[UserResponse.model_validate(u) for u in result.items],
        page=result.page,
        per_page=result.per_page,
        total=result.total,
        pages=result.pages,
    )


@router.get("/{user_id}", response_model=UserProfileResponse, name="profile")
async def get_profile(
    user_id: str,
    svc: Annotated[UserQueryService, Depends(get_user_query_service)],
):
    """Public profile: user, held roles, and global roles still assignable."""
    profile = await svc.get_profile(user_id)
    return UserProfileResponse(
        user=UserResponse.model_validate(profile.user),
        push_key=profile.push_key,
        roles=[RoleResponse.model_validate(r) for r in profile.roles],
        assignable_roles=[RoleResponse.model_validate(r) for r in profile.assignable_roles],
    )


@router.get("/{user_id}/preferences", response_model=PreferenceFormResponse)
async def get_preferences(
    user_id: str,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    svc: Annotated[ContactPreferenceService, Depends(get_preference_service)],
):
    """Edit form data. Self, or edit-users."""
    form = await svc.get_preference_matrix(current_user.id, user_id)
    return PreferenceFormResponse(
        user=UserResponse.model_validate(form.user),
        push_key=form.push_key,
        topics=[TopicResponse.model_validate(t) for t in form.topics],
        notifications=form.matrix,
    )


@router.put("/{user_id}/preferences", response_model=ProfileUpdateResponse)
@limit_writes
async def update_preferences(
    request: Request,
    user_id: str,
    body: ProfileUpdateRequest,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    svc: Annotated[ContactPreferenceService, Depends(get_preference_service_for_write)],
):
    """Save profile fields and reconcile subscriptions to the submitted matrix."""
    result = await svc.reconcile(
        current_user.id,
        user_id,
        body.notifications,
        ProfileUpdate(name=body.name, push_key=body.push_key),
    )
    return ProfileUpdateResponse(
        message=messages.PROFILE_UPDATED,
        user=UserResponse.model_validate(result.user),
        push_key=result.push_key,
        inserted=len(result.diff.to_insert),
        deleted=len(result.diff.to_delete),
    )
