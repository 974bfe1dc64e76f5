"""Domain exceptions for the admin control panel.

Business rule violations, independent of infrastructure. All of them are
recoverable: the presentation layer maps them to HTTP responses with a
user-facing message (see acp.core.exception_handlers). Persistence failures
are not wrapped here and propagate unchanged.
"""

from typing import Any

from acp.core import messages


class AcpException(Exception):
    """Base exception for all control panel errors.

    Attributes:
        message: Human-readable error description (safe to show to the user).
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Response body for the API error envelope."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(AcpException):
    """Raised when input validation fails (missing or malformed field)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(AcpException):
    """Raised when the request carries no valid principal."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(AcpException):
    """Raised when the principal lacks the capability for the operation.

    Details name the capability only, never the target, so an unauthorized
    caller learns nothing about whether the target exists.
    """

    def __init__(
        self,
        capability: str | None = None,
        message: str = messages.PERMISSION_DENIED,
    ) -> None:
        details = {"capability": capability} if capability else {}
        super().__init__(message, "PERMISSION_DENIED", details)


class ResourceNotFoundException(AcpException):
    """Raised when a referenced user, role, or topic does not exist."""

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        message: str | None = None,
    ) -> None:
        super().__init__(
            message or f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class DuplicateAssignmentException(AcpException):
    """Raised when assigning a role the user already holds (benign rejection)."""

    def __init__(
        self,
        message: str,
        assignment_type: str,
        details_extra: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with message and assignment context.

        Args:
            message: Human-readable description (e.g. 'The user already has that role.').
            assignment_type: Kind of edge, e.g. 'user_role'.
            details_extra: Optional extra keys (e.g. user_id, role_id).
        """
        details = dict(details_extra or {})
        details["assignment_type"] = assignment_type
        super().__init__(message, "DUPLICATE_ASSIGNMENT", details)
