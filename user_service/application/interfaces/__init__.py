"""Application interfaces (ports)."""

from user_service.application.interfaces.repositories import (
    ICredentialRepository,
    IUserRepository,
)

__all__ = [
    "ICredentialRepository",
    "IUserRepository",
]
