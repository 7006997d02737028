"""Application DTOs (no ORM dependency)."""

from user_service.application.dtos.user import (
    USER_SCALAR_FIELDS,
    CredentialDto,
    UserDto,
    UserPatch,
)

__all__ = [
    "USER_SCALAR_FIELDS",
    "CredentialDto",
    "UserDto",
    "UserPatch",
]
