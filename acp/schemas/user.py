"""User and contact preference API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from acp.schemas.role import RoleResponse


class UserResponse(BaseModel):
    """User response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    is_active: bool


class UserListResponse(BaseModel):
    """One page of the admin user list."""

    items: list[UserResponse]
    page: int
    per_page: int
    total: int
    pages: int


class UserProfileResponse(BaseModel):
    """Profile page: user, held roles, and roles still assignable."""

    user: UserResponse
    push_key: str | None
    roles: list[RoleResponse]
    assignable_roles: list[RoleResponse]


class TopicResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None


class PreferenceFormResponse(BaseModel):
    """Edit form data: every topic x mode with its current selection."""

    user: UserResponse
    push_key: str | None
    topics: list[TopicResponse]
    notifications: dict[str, dict[str, bool]]


class ProfileUpdateRequest(BaseModel):
    """Request body for PUT /users/{id}/preferences.

    notifications is the complete desired state: topic name -> selected modes.
    Topics left out are unsubscribed from every mode.
    """

    name: str = Field(..., max_length=255)
    push_key: str | None = Field(default=None, max_length=512)
    notifications: dict[str, list[str]] = Field(default_factory=dict)


class ProfileUpdateResponse(BaseModel):
    """Saved profile plus the number of subscription rows written."""

    message: str
    user: UserResponse
    push_key: str | None
    inserted: int
    deleted: int
