"""SQLAlchemy repository implementations."""

from userhub.infrastructure.persistence.sqlalchemy.repositories.token_repository import (  # noqa: E501
    TokenRepositorySQLAlchemy,
)
from userhub.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # noqa: E501
    UserRepositorySQLAlchemy,
)

__all__ = [
    "TokenRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
