"""Core constants: cache key structure and capability names.

Single source of truth for cache key layout (DRY) and for the mapping from
gate capabilities to the roles that grant them.
"""

# Cache key prefix and segments. Derived facts use user:<id>:is:<name>.
CACHE_PREFIX_USER = "user"
CACHE_SEGMENT_IS = "is"
CACHE_KEY_SEP = ":"

# Capabilities checked by the gate
CAPABILITY_VIEW_ACP = "view-acp"
CAPABILITY_MANAGE_USER_ROLES = "manage-user-roles"
CAPABILITY_EDIT_USERS = "edit-users"

ADMIN_ROLE_NAME = "Admin"

# Capability -> role names that grant it. A user holding any listed role has the capability.
CAPABILITY_ROLES: dict[str, tuple[str, ...]] = {
    CAPABILITY_VIEW_ACP: (ADMIN_ROLE_NAME,),
    CAPABILITY_MANAGE_USER_ROLES: (ADMIN_ROLE_NAME,),
    CAPABILITY_EDIT_USERS: (ADMIN_ROLE_NAME,),
}

# Confirmation action names (resolved to URLs by the API layer)
ACTION_REMOVE_ROLE_CONFIRM = "remove-role-confirm"
ACTION_PROFILE = "profile"
