"""User-roles API: grant a role, and two-step revoke (describe, then confirm)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from acp.api.v1.dependencies import get_current_user, get_role_management_service
from acp.application.dtos.role import ConfirmationAction
from acp.application.dtos.user import UserResult
from acp.application.services import RoleManagementService
from acp.core import messages
from acp.core.constants import ACTION_REMOVE_ROLE_CONFIRM
from acp.core.limiter import limit_writes
from acp.schemas.role import (
    RevocationConfirmationResponse,
    RevocationResultResponse,
    RoleAssignedResponse,
    RoleAssignRequest,
)

router = APIRouter()


def _action_url(request: Request, action: ConfirmationAction) -> str:
    """Resolve a named action to a path on this app."""
    return str(request.url_for(action.name, **action.params).path)


@router.post("/{user_id}/roles", response_model=RoleAssignedResponse, status_code=201)
@limit_writes
async def grant_role(
    request: Request,
    user_id: str,
    body: RoleAssignRequest,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    svc: Annotated[RoleManagementService, Depends(get_role_management_service)],
):
    """Grant a role. 403 without manage-user-roles, 404 unknown user/role, 409 already held."""
    result = await svc.grant_role(current_user.id, user_id, body.role_id)
    return RoleAssignedResponse(
        message=messages.ROLE_ADD_SUCCESS,
        user_id=result.user_id,
        role_id=result.role_id,
        role_name=result.role_name,
    )


@router.get(
    "/{user_id}/roles/{role_id}/revoke",
    response_model=RevocationConfirmationResponse,
)
async def describe_revocation(
    request: Request,
    user_id: str,
    role_id: str,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    svc: Annotated[RoleManagementService, Depends(get_role_management_service)],
):
    """Confirmation prompt for removing a role. Changes nothing."""
    desc = await svc.describe_revocation(current_user.id, user_id, role_id)
    return RevocationConfirmationResponse(
        header=desc.header,
        body=desc.body,
        user_id=desc.user_id,
        role_id=desc.role_id,
        role_name=desc.role_name,
        state=desc.state.value,
        confirm_url=_action_url(request, desc.confirm),
        cancel_url=_action_url(request, desc.cancel),
    )


@router.post(
    "/{user_id}/roles/{role_id}/revoke",
    response_model=RevocationResultResponse,
    name=ACTION_REMOVE_ROLE_CONFIRM,
)
@limit_writes
async def confirm_revocation(
    request: Request,
    user_id: str,
    role_id: str,
    current_user: Annotated[UserResult, Depends(get_current_user)],
    svc: Annotated[RoleManagementService, Depends(get_role_management_service)],
):
    """Remove the role. Removing a role the user does not hold succeeds with removed=false."""
    result = await svc.confirm_revocation(current_user.id, user_id, role_id)
    return RevocationResultResponse(
        message=messages.ROLE_DEL_SUCCESS,
        user_id=result.user_id,
        role_id=result.role_id,
        role_name=result.role_name,
        removed=result.removed,
        state=result.state.value,
    )
