"""Persistence repositories. Re-exports for dependency injection."""

from user_service.infrastructure.persistence.repositories.base import BaseRepository
from user_service.infrastructure.persistence.repositories.credential_repo import (
    CredentialRepository,
)
from user_service.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "CredentialRepository",
    "UserRepository",
]
