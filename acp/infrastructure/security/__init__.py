"""Security: JWT verification for the request principal."""

from acp.infrastructure.security.jwt import create_access_token, verify_token

__all__ = [
    "create_access_token",
    "verify_token",
]
