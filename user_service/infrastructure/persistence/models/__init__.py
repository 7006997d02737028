"""SQLAlchemy ORM models. Import here so Base.metadata sees every table."""

from user_service.infrastructure.persistence.models.credential import Credential
from user_service.infrastructure.persistence.models.user import User

__all__ = ["Credential", "User"]
