"""Credential repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from user_service.infrastructure.persistence.models.credential import Credential
from user_service.infrastructure.persistence.repositories.base import BaseRepository


class CredentialRepository(BaseRepository[Credential]):
    """Credential repository. Credentials are provisioned outside the user API."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Credential)

    async def get_by_username(self, username: str) -> Credential | None:
        result = await self.db.execute(
            select(Credential).where(Credential.username == username)
        )
        return result.scalar_one_or_none()

    async def delete_by_credential_id(self, credential_id: int) -> None:
        """Delete the credential row; a missing id is a no-op."""
        credential = await self.get_by_id(credential_id)
        if credential is None:
            return
        await self.delete(credential)
