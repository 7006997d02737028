"""User repository: lookups by id, by credential username, and full listing."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from user_service.infrastructure.persistence.models.credential import Credential
from user_service.infrastructure.persistence.models.user import User
from user_service.infrastructure.persistence.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """User repository. Returns ORM users with their credential eagerly loaded."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def get_by_credential_username(self, username: str) -> User | None:
        """Return the user whose linked credential has this username."""
        result = await self.db.execute(
            select(User).join(User.credential).where(Credential.username == username)
        )
        return result.scalar_one_or_none()

    async def create_user(
        self,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
    ) -> User:
        """Insert a user without a credential and return it with its generated id."""
        user = User(first_name=first_name, last_name=last_name, email=email, phone=phone)
        return await self.save(user)
