"""Application services."""

from user_service.application.services.user_service import UserService, has_credential

__all__ = ["UserService", "has_credential"]
