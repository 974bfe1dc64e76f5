"""Domain enumerations (delivery modes, revocation lifecycle)."""

from enum import Enum


class ContactMode(str, Enum):
    """Delivery channel for a subscribed topic."""

    EMAIL = "email"
    PUSH = "push"

    @classmethod
    def parse(cls, value: "ContactMode | str") -> "ContactMode | None":
        """Return the member for value, or None when it is not a known mode."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class RevocationState(str, Enum):
    """Two-phase role revocation: described (pending) then applied."""

    PENDING = "pending"
    APPLIED = "applied"
