"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from user_service.domain.enums import RoleBasedAuthority
from user_service.domain.exceptions import (
    UserNotFoundException,
    UserServiceException,
    ValidationException,
)

__all__ = [
    # Enums
    "RoleBasedAuthority",
    # Exceptions
    "UserNotFoundException",
    "UserServiceException",
    "ValidationException",
]
