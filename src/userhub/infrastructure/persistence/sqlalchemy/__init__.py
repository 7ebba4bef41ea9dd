"""SQLAlchemy persistence adapters."""

from userhub.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine_for_url,
    create_tables,
)
from userhub.infrastructure.persistence.sqlalchemy.models import (
    Base,
    TokenModel,
    UserModel,
)
from userhub.infrastructure.persistence.sqlalchemy.repositories import (
    TokenRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from userhub.infrastructure.persistence.sqlalchemy.unit_of_work import (
    SQLAlchemyUnitOfWork,
)

__all__ = [
    "Base",
    "SQLAlchemyUnitOfWork",
    "TokenModel",
    "TokenRepositorySQLAlchemy",
    "UserModel",
    "UserRepositorySQLAlchemy",
    "create_engine_for_url",
    "create_tables",
]
