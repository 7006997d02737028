"""Credential ORM model (one-to-one with User, FK on this side)."""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, Enum, ForeignKey, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from user_service.domain.enums import RoleBasedAuthority
from user_service.infrastructure.persistence.database import Base
from user_service.infrastructure.persistence.models.mixins import TimestampMixin

if TYPE_CHECKING:
    from user_service.infrastructure.persistence.models.user import User


class Credential(TimestampMixin, Base):
    """Credential model. Table: credentials. Unique username and unique user_id."""

    __tablename__ = "credentials"

    credential_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    username: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)
    password: Mapped[str | None] = mapped_column(String(255), nullable=True)
    role: Mapped[RoleBasedAuthority] = mapped_column(
        Enum(RoleBasedAuthority, native_enum=False, length=32),
        nullable=False,
        default=RoleBasedAuthority.ROLE_USER,
    )
    is_enabled: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )
    is_account_non_expired: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )
    is_account_non_locked: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )
    is_credentials_non_expired: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )
    # Nullable so the user side can unlink before the row is deleted.
    user_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("users.user_id", ondelete="SET NULL"),
        nullable=True,
        unique=True,
    )

    user: Mapped[Optional["User"]] = relationship(
        "User",
        back_populates="credential",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"Credential(credential_id={self.credential_id!r}, username={self.username!r})"
