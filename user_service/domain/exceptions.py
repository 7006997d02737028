"""Domain exceptions for the user service.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class UserServiceException(Exception):
    """Base exception for all user service errors.

    Presentation layer maps these to HTTP responses using message,
    error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(UserServiceException):
    """Raised when input validation fails outside of request schema validation."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class UserNotFoundException(UserServiceException):
    """Raised when a user does not exist or has no linked credential.

    Both conditions collapse into this one error: a user without
    credentials is not visible to reads or deletes.
    """

    def __init__(self, value: int | str, lookup: str = "id") -> None:
        """Initialize with the lookup key that failed.

        Args:
            value: The user id or username that was not found.
            lookup: Name of the lookup key ('id' or 'username').
        """
        super().__init__(
            f"User with {lookup}: {value} not found",
            "USER_NOT_FOUND",
            {"lookup": lookup, "value": value},
        )

