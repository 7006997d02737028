"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass, field

from user_service.domain.enums import RoleBasedAuthority

# Scalar user fields; the credential link is never written through these.
USER_SCALAR_FIELDS = ("first_name", "last_name", "email", "phone")


@dataclass(frozen=True)
class CredentialDto:
    """Credential read-model nested inside UserDto."""

    credential_id: int | None = None
    username: str | None = None
    password: str | None = None
    role: RoleBasedAuthority | None = None
    is_enabled: bool | None = None
    is_account_non_expired: bool | None = None
    is_account_non_locked: bool | None = None
    is_credentials_non_expired: bool | None = None


@dataclass(frozen=True)
class UserDto:
    """User transfer object at the service boundary.

    Also the full-replace input of UserService.update: every scalar field is
    written, absent ones as None. credential_dto is output only.
    """

    user_id: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    credential_dto: CredentialDto | None = None


@dataclass(frozen=True)
class UserPatch:
    """Partial update overlaid onto an existing user by UserService.update_by_id.

    Only fields named in fields_set are applied, so an explicit None clears a
    field while an omitted one is left alone.
    """

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    fields_set: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_mapping(cls, values: dict[str, str | None]) -> "UserPatch":
        """Build a patch from the fields actually supplied; unknown keys are ignored."""
        known = {k: v for k, v in values.items() if k in USER_SCALAR_FIELDS}
        return cls(**known, fields_set=frozenset(known))

    def changes(self) -> dict[str, str | None]:
        """Return the field values to overlay, in declaration order."""
        return {
            name: getattr(self, name)
            for name in USER_SCALAR_FIELDS
            if name in self.fields_set
        }
