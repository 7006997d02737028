"""Pydantic request/response schemas for the API."""

from user_service.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from user_service.schemas.user import (
    CredentialSchema,
    UserCollectionResponse,
    UserSchema,
)

__all__ = [
    "CredentialSchema",
    "HealthResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "UserCollectionResponse",
    "UserSchema",
]
