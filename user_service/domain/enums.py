"""Domain enumerations for the user service.

Enums represent fixed sets of domain values (e.g. credential role).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class RoleBasedAuthority(_ValuesMixin, str, Enum):
    """Role granted by a credential."""

    ROLE_USER = "ROLE_USER"
    ROLE_ADMIN = "ROLE_ADMIN"
