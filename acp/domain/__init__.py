"""Domain layer: exceptions, enums, and contact preference reconciliation."""

from acp.domain.enums import ContactMode, RevocationState
from acp.domain.exceptions import (
    AcpException,
    AuthenticationException,
    AuthorizationException,
    DuplicateAssignmentException,
    ResourceNotFoundException,
    ValidationException,
)
from acp.domain.preferences import (
    ContactCell,
    ContactDiff,
    PreferenceMatrix,
    build_preference_matrix,
    compute_contact_diff,
)

__all__ = [
    "AcpException",
    "AuthenticationException",
    "AuthorizationException",
    "ContactCell",
    "ContactDiff",
    "ContactMode",
    "DuplicateAssignmentException",
    "PreferenceMatrix",
    "ResourceNotFoundException",
    "RevocationState",
    "ValidationException",
    "build_preference_matrix",
    "compute_contact_diff",
]
