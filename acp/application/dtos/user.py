"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass

from acp.application.dtos.role import RoleResult


@dataclass(frozen=True)
class UserResult:
    """User read-model."""

    id: str
    name: str
    email: str
    is_active: bool


@dataclass(frozen=True)
class ProfileUpdate:
    """Plain profile fields saved alongside a preference submission."""

    name: str
    push_key: str | None = None


@dataclass(frozen=True)
class UserProfile:
    """Profile page: the user, held roles, and global roles still assignable."""

    user: UserResult
    push_key: str | None
    roles: tuple[RoleResult, ...]
    assignable_roles: tuple[RoleResult, ...]


@dataclass(frozen=True)
class UserPage:
    """One page of the admin user list."""

    items: tuple[UserResult, ...]
    page: int
    per_page: int
    total: int

    @property
    def pages(self) -> int:
        return max(1, -(-self.total // self.per_page))
