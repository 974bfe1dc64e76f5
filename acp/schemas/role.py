"""Role API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class RoleAssignRequest(BaseModel):
    """Request body for POST /users/{user_id}/roles."""

    role_id: str = Field(..., min_length=1)


class RoleResponse(BaseModel):
    """Role list/detail response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None
    is_global: bool


class RoleAssignedResponse(BaseModel):
    """Response for a successful grant (201)."""

    message: str
    user_id: str
    role_id: str
    role_name: str


class RevocationConfirmationResponse(BaseModel):
    """Step one of a revoke: prompt text and where to go next."""

    header: str
    body: str
    user_id: str
    role_id: str
    role_name: str
    state: str
    confirm_url: str
    cancel_url: str


class RevocationResultResponse(BaseModel):
    """Step two of a revoke."""

    message: str
    user_id: str
    role_id: str
    role_name: str
    removed: bool
    state: str
