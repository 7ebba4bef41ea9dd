"""SQLAlchemy models."""

from userhub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from userhub.infrastructure.persistence.sqlalchemy.models.token_model import (
    TokenModel,
)
from userhub.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "TokenModel",
    "UserModel",
]
