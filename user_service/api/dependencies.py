"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the user service. Reads get a plain session;
writes get a transactional one so a multi-step operation (delete's
unlink-then-delete) commits or rolls back as a whole.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from user_service.application.services.user_service import UserService
from user_service.infrastructure.persistence.database import (
    get_db,
    get_db_transactional,
)
from user_service.infrastructure.persistence.repositories import (
    CredentialRepository,
    UserRepository,
)


def build_user_service(db: AsyncSession) -> UserService:
    """UserService over repositories sharing one session."""
    return UserService(UserRepository(db), CredentialRepository(db))


async def get_user_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserService:
    """User service for read operations."""
    return build_user_service(db)


async def get_user_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> UserService:
    """User service for writes (transactional)."""
    return build_user_service(db)
