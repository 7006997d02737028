"""Unit tests for UserService with mocked repositories."""

from unittest.mock import AsyncMock

import pytest

from user_service.application.dtos.user import CredentialDto, UserDto, UserPatch
from user_service.application.interfaces.repositories import (
    ICredentialRepository,
    IUserRepository,
)
from user_service.application.services.user_service import UserService, has_credential
from user_service.domain.exceptions import UserNotFoundException, ValidationException
from user_service.infrastructure.persistence.models import Credential, User


def _credential(credential_id: int = 1, username: str = "testuser") -> Credential:
    return Credential(credential_id=credential_id, username=username, password="password123")


def _user(user_id: int = 1, credential: Credential | None = None, **fields) -> User:
    values = {
        "first_name": "John",
        "last_name": "Doe",
        "email": "john.doe@example.com",
        "phone": "1234567890",
    }
    values.update(fields)
    return User(user_id=user_id, credential=credential, **values)


@pytest.fixture
def user_repo() -> AsyncMock:
    return AsyncMock(spec=IUserRepository)


@pytest.fixture
def credential_repo() -> AsyncMock:
    return AsyncMock(spec=ICredentialRepository)


@pytest.fixture
def service(user_repo: AsyncMock, credential_repo: AsyncMock) -> UserService:
    return UserService(user_repo, credential_repo)


def test_has_credential() -> None:
    assert has_credential(_user(credential=_credential()))
    assert not has_credential(_user(credential=None))
    assert not has_credential(None)


class TestFindById:
    async def test_returns_user_with_credential(self, service, user_repo) -> None:
        user_repo.get_by_id.return_value = _user(credential=_credential())

        result = await service.find_by_id(1)

        assert result.user_id == 1
        assert result.first_name == "John"
        assert result.last_name == "Doe"
        assert result.credential_dto is not None
        assert result.credential_dto.username == "testuser"
        user_repo.get_by_id.assert_awaited_once_with(1)

    async def test_missing_user_raises(self, service, user_repo) -> None:
        user_repo.get_by_id.return_value = None

        with pytest.raises(UserNotFoundException) as exc_info:
            await service.find_by_id(999)

        assert exc_info.value.error_code == "USER_NOT_FOUND"
        assert exc_info.value.message == "User with id: 999 not found"
        user_repo.get_by_id.assert_awaited_once_with(999)

    async def test_user_without_credential_raises(self, service, user_repo) -> None:
        user_repo.get_by_id.return_value = _user(credential=None)

        with pytest.raises(UserNotFoundException):
            await service.find_by_id(1)

        user_repo.get_by_id.assert_awaited_once_with(1)


class TestFindByUsername:
    async def test_returns_linked_user(self, service, user_repo) -> None:
        user_repo.get_by_credential_username.return_value = _user(credential=_credential())

        result = await service.find_by_username("testuser")

        assert result.credential_dto is not None
        assert result.credential_dto.username == "testuser"
        user_repo.get_by_credential_username.assert_awaited_once_with("testuser")

    async def test_unknown_username_raises(self, service, user_repo) -> None:
        user_repo.get_by_credential_username.return_value = None

        with pytest.raises(UserNotFoundException) as exc_info:
            await service.find_by_username("nonexistent")

        assert exc_info.value.details == {"lookup": "username", "value": "nonexistent"}


class TestFindAll:
    async def test_returns_all_users_with_credentials(self, service, user_repo) -> None:
        user_repo.get_all.return_value = [
            _user(1, _credential()),
            _user(2, _credential(2, "janesmith"), first_name="Jane", last_name="Smith"),
        ]

        result = await service.find_all()

        assert [u.user_id for u in result] == [1, 2]
        user_repo.get_all.assert_awaited_once_with()

    async def test_filters_users_without_credentials(self, service, user_repo) -> None:
        user_repo.get_all.return_value = [
            _user(1, _credential()),
            _user(2, None, first_name="Jane", last_name="Smith"),
        ]

        result = await service.find_all()

        assert len(result) == 1
        assert result[0].user_id == 1

    async def test_keeps_repository_order(self, service, user_repo) -> None:
        user_repo.get_all.return_value = [
            _user(3, _credential(3, "c")),
            _user(4, None),
            _user(1, _credential(1, "a")),
        ]

        result = await service.find_all()

        assert [u.user_id for u in result] == [3, 1]

    async def test_empty(self, service, user_repo) -> None:
        user_repo.get_all.return_value = []
        assert await service.find_all() == []


class TestSave:
    async def test_persists_new_user(self, service, user_repo) -> None:
        saved = _user(2, None, first_name="New", last_name="User", email="newuser@example.com", phone="9876543210")
        user_repo.create_user.return_value = saved
        dto = UserDto(first_name="New", last_name="User", email="newuser@example.com", phone="9876543210")

        result = await service.save(dto)

        assert result.user_id == 2
        assert (result.first_name, result.last_name, result.email, result.phone) == (
            "New", "User", "newuser@example.com", "9876543210",
        )
        assert result.credential_dto is None
        user_repo.create_user.assert_awaited_once()
        user_repo.save.assert_not_awaited()

    async def test_ignores_supplied_id_and_credential(self, service, user_repo) -> None:
        user_repo.create_user.return_value = _user(3, None, first_name="New")
        await service.save(
            UserDto(user_id=42, first_name="New", credential_dto=CredentialDto(credential_id=9, username="x"))
        )

        user_repo.create_user.assert_awaited_once_with(
            first_name="New", last_name=None, email=None, phone=None
        )


class TestUpdate:
    async def test_replaces_scalars_and_keeps_credential(self, service, user_repo) -> None:
        credential = _credential()
        existing = _user(1, credential)
        user_repo.get_by_id.return_value = existing
        user_repo.save.side_effect = lambda u: u
        dto = UserDto(
            user_id=1,
            first_name="Updated",
            last_name="Name",
            email="updated@example.com",
            phone="1111111111",
        )

        result = await service.update(dto)

        user_repo.get_by_id.assert_awaited_once_with(1)
        user_repo.save.assert_awaited_once_with(existing)
        assert existing.first_name == "Updated"
        assert existing.phone == "1111111111"
        assert existing.credential is credential
        assert result.first_name == "Updated"
        assert result.credential_dto is not None

    async def test_absent_fields_become_none(self, service, user_repo) -> None:
        existing = _user(1, _credential())
        user_repo.get_by_id.return_value = existing
        user_repo.save.side_effect = lambda u: u

        await service.update(UserDto(user_id=1, first_name="Only"))

        assert existing.first_name == "Only"
        assert existing.last_name is None
        assert existing.email is None

    async def test_missing_id_raises_validation(self, service, user_repo) -> None:
        with pytest.raises(ValidationException):
            await service.update(UserDto(first_name="No id"))
        user_repo.save.assert_not_awaited()

    async def test_unknown_user_raises(self, service, user_repo) -> None:
        user_repo.get_by_id.return_value = None
        with pytest.raises(UserNotFoundException):
            await service.update(UserDto(user_id=7, first_name="X"))
        user_repo.save.assert_not_awaited()


class TestUpdateById:
    async def test_overlays_only_supplied_fields(self, service, user_repo) -> None:
        existing = _user(1, _credential())
        user_repo.get_by_id.return_value = existing
        user_repo.save.side_effect = lambda u: u

        result = await service.update_by_id(1, UserPatch.from_mapping({"first_name": "Updated"}))

        assert result.first_name == "Updated"
        assert result.last_name == "Doe"
        assert result.email == "john.doe@example.com"

    async def test_explicit_none_clears_field(self, service, user_repo) -> None:
        existing = _user(1, _credential())
        user_repo.get_by_id.return_value = existing
        user_repo.save.side_effect = lambda u: u

        await service.update_by_id(1, UserPatch.from_mapping({"phone": None}))

        assert existing.phone is None
        assert existing.first_name == "John"

    async def test_tolerates_missing_credential(self, service, user_repo) -> None:
        existing = _user(1, None)
        user_repo.get_by_id.return_value = existing
        user_repo.save.side_effect = lambda u: u

        result = await service.update_by_id(1, UserPatch.from_mapping({"last_name": "Fixed"}))

        assert result.last_name == "Fixed"
        assert result.credential_dto is None

    async def test_unknown_user_raises(self, service, user_repo) -> None:
        user_repo.get_by_id.return_value = None
        with pytest.raises(UserNotFoundException):
            await service.update_by_id(9, UserPatch.from_mapping({"first_name": "X"}))


class TestDeleteById:
    async def test_unlinks_then_deletes_credential(
        self, service, user_repo, credential_repo
    ) -> None:
        user = _user(1, _credential(5))
        user_repo.get_by_id.return_value = user
        calls: list[tuple[str, object]] = []

        async def record_save(u: User) -> User:
            calls.append(("save", u.credential))
            return u

        async def record_delete(credential_id: int) -> None:
            calls.append(("delete", credential_id))

        user_repo.save.side_effect = record_save
        credential_repo.delete_by_credential_id.side_effect = record_delete

        await service.delete_by_id(1)

        assert calls == [("save", None), ("delete", 5)]
        assert user.credential is None
        user_repo.get_by_id.assert_awaited_once_with(1)
        credential_repo.delete_by_credential_id.assert_awaited_once_with(5)

    async def test_user_without_credential_raises(
        self, service, user_repo, credential_repo
    ) -> None:
        user_repo.get_by_id.return_value = _user(1, None)

        with pytest.raises(UserNotFoundException):
            await service.delete_by_id(1)

        user_repo.get_by_id.assert_awaited_once_with(1)
        user_repo.save.assert_not_awaited()
        credential_repo.delete_by_credential_id.assert_not_awaited()

    async def test_missing_user_raises(self, service, user_repo, credential_repo) -> None:
        user_repo.get_by_id.return_value = None

        with pytest.raises(UserNotFoundException):
            await service.delete_by_id(404)

        credential_repo.delete_by_credential_id.assert_not_awaited()
