"""Seed a local database with a few users for manual API exploration.

Creates two users with credentials (johnuser, janesmith) and one user without
a credential, which GET /api/users leaves out. Tables are created first.
Running it twice fails on the unique usernames; reset the database instead.

Usage:
    python -m scripts.seed_dev_data
"""

import asyncio
from pathlib import Path

from dotenv import load_dotenv

from user_service.application.dtos.user import UserDto
from user_service.application.services.user_service import UserService
from user_service.domain.enums import RoleBasedAuthority
from user_service.infrastructure.persistence import database
from user_service.infrastructure.persistence.models import Credential
from user_service.infrastructure.persistence.repositories import (
    CredentialRepository,
    UserRepository,
)

_USERS = [
    (UserDto(first_name="John", last_name="Doe", email="john.doe@example.com", phone="1234567890"), "johnuser"),
    (UserDto(first_name="Jane", last_name="Smith", email="jane.smith@example.com", phone="0987654321"), "janesmith"),
    (UserDto(first_name="Orphan", last_name="Record", email="orphan@example.com", phone="5555555555"), None),
]


async def main() -> None:
    load_dotenv(Path(__file__).resolve().parent.parent / ".env", override=True)
    await database.create_tables()
    assert database.AsyncSessionLocal is not None
    try:
        async with database.AsyncSessionLocal() as session:
            async with session.begin():
                user_repo = UserRepository(session)
                credential_repo = CredentialRepository(session)
                service = UserService(user_repo, credential_repo)
                for dto, username in _USERS:
                    created = await service.save(dto)
                    if username is None:
                        print(f"User {created.user_id} ({dto.first_name}) without credential")
                        continue
                    assert created.user_id is not None
                    user = await user_repo.get_by_id(created.user_id)
                    await credential_repo.save(
                        Credential(
                            username=username,
                            password="password123",
                            role=RoleBasedAuthority.ROLE_USER,
                            user=user,
                        )
                    )
                    print(f"User {created.user_id} ({dto.first_name}) with credential {username}")
    finally:
        await database.dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
