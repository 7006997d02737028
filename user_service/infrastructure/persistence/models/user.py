"""User ORM model."""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from user_service.infrastructure.persistence.database import Base
from user_service.infrastructure.persistence.models.mixins import TimestampMixin

if TYPE_CHECKING:
    from user_service.infrastructure.persistence.models.credential import Credential


class User(TimestampMixin, Base):
    """User model. Table: users.

    The credential link is owned by the credential row (credentials.user_id);
    User.credential is its navigation side and is eagerly loaded so it can be
    read outside the session's async context.
    """

    __tablename__ = "users"

    user_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True)

    credential: Mapped[Optional["Credential"]] = relationship(
        "Credential",
        back_populates="user",
        uselist=False,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"User(user_id={self.user_id!r}, email={self.email!r})"
