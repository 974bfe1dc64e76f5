"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from acp.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from acp.api.v1.endpoints import health, user_roles, users

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(user_roles.router, prefix="/users", tags=["user-roles"])
