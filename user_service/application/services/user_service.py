"""User application service: listing, lookup, create, update and delete of users.

A user is only visible once it has a linked credential. Reads and deletes
apply has_credential() and treat a user without one exactly like a missing
row; update_by_id is the one operation that tolerates it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from user_service.application.dtos.user import (
    USER_SCALAR_FIELDS,
    CredentialDto,
    UserDto,
    UserPatch,
)
from user_service.domain.exceptions import UserNotFoundException, ValidationException

if TYPE_CHECKING:
    from user_service.application.interfaces.repositories import (
        ICredentialRepository,
        IUserRepository,
    )
    from user_service.infrastructure.persistence.models.credential import Credential
    from user_service.infrastructure.persistence.models.user import User

logger = logging.getLogger(__name__)


def has_credential(user: User | None) -> bool:
    """True when the user exists and has a linked credential."""
    return user is not None and user.credential is not None


def _credential_to_dto(credential: Credential) -> CredentialDto:
    return CredentialDto(
        credential_id=credential.credential_id,
        username=credential.username,
        password=credential.password,
        role=credential.role,
        is_enabled=credential.is_enabled,
        is_account_non_expired=credential.is_account_non_expired,
        is_account_non_locked=credential.is_account_non_locked,
        is_credentials_non_expired=credential.is_credentials_non_expired,
    )


def _user_to_dto(user: User) -> UserDto:
    """Map ORM User to UserDto, nesting the credential when linked."""
    credential = user.credential
    return UserDto(
        user_id=user.user_id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        phone=user.phone,
        credential_dto=_credential_to_dto(credential) if credential is not None else None,
    )


class UserService:
    """Business rules for users over the user and credential repositories."""

    def __init__(
        self,
        user_repo: IUserRepository,
        credential_repo: ICredentialRepository,
    ) -> None:
        self._user_repo = user_repo
        self._credential_repo = credential_repo

    async def _get_visible_user(self, user_id: int) -> User:
        """Load a user that has a credential; raise UserNotFoundException otherwise."""
        user = await self._user_repo.get_by_id(user_id)
        if not has_credential(user):
            raise UserNotFoundException(user_id)
        assert user is not None
        return user

    async def find_all(self) -> list[UserDto]:
        """Return every user that has a credential, in repository order."""
        logger.debug("Fetching all users")
        users = await self._user_repo.get_all()
        return [_user_to_dto(u) for u in users if has_credential(u)]

    async def find_by_id(self, user_id: int) -> UserDto:
        """Return one user by id. Raises UserNotFoundException if absent or without credential."""
        logger.debug("Fetching user by id %s", user_id)
        return _user_to_dto(await self._get_visible_user(user_id))

    async def find_by_username(self, username: str) -> UserDto:
        """Return the user whose credential has this username."""
        logger.debug("Fetching user by username %s", username)
        user = await self._user_repo.get_by_credential_username(username)
        if not has_credential(user):
            raise UserNotFoundException(username, lookup="username")
        assert user is not None
        return _user_to_dto(user)

    async def save(self, dto: UserDto) -> UserDto:
        """Create a new user. Any id or credential on the DTO is ignored."""
        saved = await self._user_repo.create_user(
            **{name: getattr(dto, name) for name in USER_SCALAR_FIELDS}
        )
        logger.info("Created user %s", saved.user_id)
        return _user_to_dto(saved)

    async def update(self, dto: UserDto) -> UserDto:
        """Replace all scalar fields of the user named by dto.user_id.

        The credential link is not part of the write, so an existing one is
        kept. Raises ValidationException without an id and
        UserNotFoundException when no such row exists.
        """
        if dto.user_id is None:
            raise ValidationException("userId is required to update a user", field="userId")
        user = await self._user_repo.get_by_id(dto.user_id)
        if user is None:
            raise UserNotFoundException(dto.user_id)
        for name in USER_SCALAR_FIELDS:
            setattr(user, name, getattr(dto, name))
        updated = await self._user_repo.save(user)
        logger.info("Updated user %s", updated.user_id)
        return _user_to_dto(updated)

    async def update_by_id(self, user_id: int, patch: UserPatch) -> UserDto:
        """Overlay the patch's supplied fields onto an existing user.

        Works on users without a credential too (administrative repair).
        """
        user = await self._user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundException(user_id)
        for name, value in patch.changes().items():
            setattr(user, name, value)
        updated = await self._user_repo.save(user)
        logger.info("Patched user %s fields=%s", user_id, sorted(patch.fields_set))
        return _user_to_dto(updated)

    async def delete_by_id(self, user_id: int) -> None:
        """Unlink and delete the user's credential; the user row is kept.

        The unlink is persisted before the credential row is deleted. Both
        writes run in the caller's transaction.
        """
        user = await self._get_visible_user(user_id)
        assert user.credential is not None
        credential_id = user.credential.credential_id
        user.credential = None
        await self._user_repo.save(user)
        await self._credential_repo.delete_by_credential_id(credential_id)
        logger.info("Deleted credential %s of user %s", credential_id, user_id)
