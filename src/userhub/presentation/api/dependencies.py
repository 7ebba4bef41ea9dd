"""FastAPI dependency injection for the UserHub API.

Provides dependencies for:
- Database sessions
- Authentication (caller id from an opaque bearer token)
- Localisation (translator and negotiated language)
- Service instances
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from userhub.application.ports import UnitOfWork
from userhub.application.services import (
    AuthenticationService,
    TokenService,
    UserService,
)
from userhub.application.validation import UserInputValidator
from userhub.infrastructure.email import EmailService
from userhub.infrastructure.i18n import Translator
from userhub.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyUnitOfWork,
    TokenRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
    create_engine_for_url,
)
from userhub.infrastructure.security import PasswordHashingService
from userhub.presentation.api.config import get_api_settings
from userhub_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Security scheme for opaque bearer tokens; never rejects on its own
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    settings = get_settings()
    url = settings.database_url

    # Ensure data directory exists for file-based SQLite
    if settings.is_sqlite and ":memory:" not in url and "///" in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    Returns
    -------
    AsyncEngine instance
    """
    return create_engine_for_url(get_database_url())


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Localisation
# -----------------------------------------------------------------------------


def get_translator(request: Request) -> Translator:
    return request.app.state.translator


def get_language(request: Request) -> str:
    """Language negotiated from the request's Accept-Language header."""
    translator: Translator = request.app.state.translator
    return translator.negotiate(request.headers.get("accept-language"))


TranslatorDep = Annotated[Translator, Depends(get_translator)]
LanguageDep = Annotated[str, Depends(get_language)]


# -----------------------------------------------------------------------------
# Services
# -----------------------------------------------------------------------------


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.password_hash_rounds)


def get_email_service(settings: SettingsDep) -> EmailService:
    return EmailService(settings)


def get_unit_of_work(session: DBSession) -> UnitOfWork:
    return SQLAlchemyUnitOfWork(session)


def get_token_service(session: DBSession) -> TokenService:
    return TokenService(TokenRepositorySQLAlchemy(session))


def get_user_service(
    session: DBSession,
    password_service: Annotated[PasswordHashingService, Depends(get_password_service)],
    email_service: Annotated[EmailService, Depends(get_email_service)],
    unit_of_work: Annotated[UnitOfWork, Depends(get_unit_of_work)],
) -> UserService:
    """
    Get user service with all dependencies.

    This service orchestrates registration, activation, listing, update
    and deletion.
    """
    user_repo = UserRepositorySQLAlchemy(session)
    return UserService(
        user_repository=user_repo,
        validator=UserInputValidator(user_repo),
        password_service=password_service,
        notifier=email_service,
        unit_of_work=unit_of_work,
    )


def get_authentication_service(
    session: DBSession,
    token_service: Annotated[TokenService, Depends(get_token_service)],
    password_service: Annotated[PasswordHashingService, Depends(get_password_service)],
    unit_of_work: Annotated[UnitOfWork, Depends(get_unit_of_work)],
) -> AuthenticationService:
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        token_service=token_service,
        password_service=password_service,
        unit_of_work=unit_of_work,
    )


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Caller identity (bearer token)
# -----------------------------------------------------------------------------


def get_bearer_token(
    credentials: Annotated[
        Optional[HTTPAuthorizationCredentials],
        Depends(security),
    ],
) -> Optional[str]:
    if credentials is None:
        return None
    return credentials.credentials


async def get_authenticated_user_id(
    token: Annotated[Optional[str], Depends(get_bearer_token)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> Optional[int]:
    """
    Resolve the caller from the Authorization header.

    Never rejects a request by itself: a missing or malformed header, an
    unknown token, a token whose owner is not active, or a failing store
    all resolve to an anonymous caller (None). Routes decide what an
    anonymous caller may do.
    """
    if not token:
        return None

    try:
        return await token_service.verify(token)
    except SQLAlchemyError as e:
        logger.error("Token lookup failed, treating caller as anonymous: %s", e)
        return None


BearerToken = Annotated[Optional[str], Depends(get_bearer_token)]
CallerId = Annotated[Optional[int], Depends(get_authenticated_user_id)]
