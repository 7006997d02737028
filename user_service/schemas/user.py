"""User API schemas.

JSON keys are camelCase; the nested credential serialises as "credential"
while the field is named credential_dto.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from user_service.application.dtos.user import CredentialDto, UserDto
from user_service.domain.enums import RoleBasedAuthority


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CredentialSchema(_CamelModel):
    """Credential nested in a user body. Password is accepted but never returned."""

    credential_id: int | None = None
    username: str | None = Field(default=None, max_length=128)
    password: str | None = Field(default=None, max_length=255, exclude=True)
    role: RoleBasedAuthority | None = Field(default=None, alias="roleBasedAuthority")
    is_enabled: bool | None = None
    is_account_non_expired: bool | None = None
    is_account_non_locked: bool | None = None
    is_credentials_non_expired: bool | None = None

    @classmethod
    def from_dto(cls, dto: CredentialDto) -> "CredentialSchema":
        return cls(
            credential_id=dto.credential_id,
            username=dto.username,
            password=dto.password,
            role=dto.role,
            is_enabled=dto.is_enabled,
            is_account_non_expired=dto.is_account_non_expired,
            is_account_non_locked=dto.is_account_non_locked,
            is_credentials_non_expired=dto.is_credentials_non_expired,
        )

    def to_dto(self) -> CredentialDto:
        return CredentialDto(
            credential_id=self.credential_id,
            username=self.username,
            password=self.password,
            role=self.role,
            is_enabled=self.is_enabled,
            is_account_non_expired=self.is_account_non_expired,
            is_account_non_locked=self.is_account_non_locked,
            is_credentials_non_expired=self.is_credentials_non_expired,
        )


class UserSchema(_CamelModel):
    """User request and response body."""

    user_id: int | None = None
    first_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)
    email: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=64)
    credential_dto: CredentialSchema | None = Field(default=None, alias="credential")

    @classmethod
    def from_dto(cls, dto: UserDto) -> "UserSchema":
        return cls(
            user_id=dto.user_id,
            first_name=dto.first_name,
            last_name=dto.last_name,
            email=dto.email,
            phone=dto.phone,
            credential_dto=(
                CredentialSchema.from_dto(dto.credential_dto)
                if dto.credential_dto is not None
                else None
            ),
        )

    def to_dto(self) -> UserDto:
        return UserDto(
            user_id=self.user_id,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            phone=self.phone,
            credential_dto=self.credential_dto.to_dto() if self.credential_dto else None,
        )


class UserCollectionResponse(BaseModel):
    """Response for GET /users: {"dtos": [...]}."""

    dtos: list[UserSchema]
