"""SQLAlchemy model for bearer tokens."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from userhub.domain.shared.time import utc_now
from userhub.infrastructure.persistence.sqlalchemy.models.base import Base


class TokenModel(Base):
    """Opaque bearer token owned by one user. Rows are never updated."""

    __tablename__ = "tokens"

    token: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<TokenModel(user_id={self.user_id})>"
