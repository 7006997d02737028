"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
Repositories hand back ORM records; the service maps them to DTOs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from user_service.infrastructure.persistence.models import User


class IUserRepository(Protocol):
    """Protocol for user repository (DIP)."""

    async def get_by_id(self, entity_id: int) -> User | None:
        """Return user by id, with its credential loaded."""

    async def get_all(self) -> list[User]:
        """Return all users, credential or not, in primary key order."""

    async def get_by_credential_username(self, username: str) -> User | None:
        """Return the user linked to the credential with this username."""

    async def create_user(
        self,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
    ) -> User:
        """Insert a user without a credential and return it with its generated id."""

    async def save(self, obj: User) -> User:
        """Update the user and return the persisted record."""


class ICredentialRepository(Protocol):
    """Protocol for credential repository (DIP)."""

    async def delete_by_credential_id(self, credential_id: int) -> None:
        """Delete the credential row if present."""
