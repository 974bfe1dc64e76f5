"""Cache key builders. Single place for key format (DRY).

The user id must not contain CACHE_KEY_SEP, otherwise user:<id> entries
could alias one another. The trailing name of a role fact is taken as-is:
nothing follows it, so "user:<id>:is:Guild:Leader" is unambiguous.
"""

from acp.core.constants import CACHE_KEY_SEP, CACHE_PREFIX_USER, CACHE_SEGMENT_IS


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value is empty or contains the cache key separator."""
    if not value:
        raise ValueError(f"Cache key component {name!r} must not be empty")
    if CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key component {name!r} must not contain separator {CACHE_KEY_SEP!r}"
        )


def user_key(user_id: str) -> str:
    """Cache key for a user record: user:<id>."""
    _validate_key_component(user_id, "user_id")
    return f"{CACHE_PREFIX_USER}{CACHE_KEY_SEP}{user_id}"


def role_key(user_id: str, name: str) -> str:
    """Cache key for a derived fact: user:<id>:is:<role or capability name>."""
    if not name:
        raise ValueError("Cache key component 'name' must not be empty")
    return f"{user_key(user_id)}{CACHE_KEY_SEP}{CACHE_SEGMENT_IS}{CACHE_KEY_SEP}{name}"
