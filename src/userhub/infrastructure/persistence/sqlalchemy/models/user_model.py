"""SQLAlchemy model for User aggregate."""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from userhub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

if TYPE_CHECKING:
    from userhub.infrastructure.persistence.sqlalchemy.models.token_model import (
        TokenModel,
    )


class UserModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting User aggregates.

    Bearer tokens are removed together with their owner, both through the
    ORM cascade and the foreign key's ``ON DELETE CASCADE``.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(32), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    inactive: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    activation_token: Mapped[Optional[str]] = mapped_column(
        String(64),
        nullable=True,
        index=True,
    )

    tokens: Mapped[list["TokenModel"]] = relationship(
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email}, inactive={self.inactive})>"
