"""DTOs for role use cases (no dependency on ORM)."""

from dataclasses import dataclass, field

from acp.domain.enums import RevocationState


@dataclass(frozen=True)
class RoleResult:
    """Role read-model."""

    id: str
    name: str
    description: str | None
    is_global: bool


@dataclass(frozen=True)
class UserRoleResult:
    """A user-role edge after a successful grant."""

    user_id: str
    role_id: str
    role_name: str
    assigned_by: str | None


@dataclass(frozen=True)
class ConfirmationAction:
    """Named action plus parameters; the API layer resolves it to a URL."""

    name: str
    params: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class RevocationConfirmation:
    """Descriptor returned by step one of a revoke; nothing has been mutated."""

    header: str
    body: str
    user_id: str
    role_id: str
    role_name: str
    confirm: ConfirmationAction
    cancel: ConfirmationAction
    state: RevocationState = RevocationState.PENDING


@dataclass(frozen=True)
class RevocationResult:
    """Outcome of step two of a revoke."""

    user_id: str
    role_id: str
    role_name: str
    removed: bool
    state: RevocationState = RevocationState.APPLIED
