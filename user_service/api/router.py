"""API router aggregation.

Includes all endpoint modules with consistent prefix and tags. Routes get
their service through user_service.api.dependencies.
"""

from fastapi import APIRouter

from user_service.api.endpoints import health, users

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
