"""Authentication service for login and logout."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from userhub.domain.auth import InactiveAccountError, InvalidCredentialsError

if TYPE_CHECKING:
    from userhub.application.ports import UnitOfWork
    from userhub.application.services.token_service import TokenService
    from userhub.domain.user import User, UserRepository
    from userhub.infrastructure.security import PasswordHashingService

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Checks credentials against the stored hash and hands out opaque bearer
    tokens. Unknown e-mail and wrong password are reported identically;
    only a correct password for an account that is not activated yet is
    reported as such.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        token_service: TokenService,
        password_service: PasswordHashingService,
        unit_of_work: UnitOfWork,
    ):
        self._user_repo = user_repository
        self._token_service = token_service
        self._password_service = password_service
        self._uow = unit_of_work

    async def login(self, email: str, password: str) -> tuple[User, str]:
        user = await self._user_repo.find_by_email(email) if email else None
        if user is None:
            logger.warning("Login rejected for unknown email: %s", email)
            raise InvalidCredentialsError

        if not password or not self._password_service.verify(
            password,
            user.password_hash,
        ):
            logger.warning("Login rejected for user %s: wrong password", user.id)
            raise InvalidCredentialsError

        if user.inactive:
            logger.warning("Login rejected for user %s: account inactive", user.id)
            raise InactiveAccountError

        async with self._uow:
            token = await self._token_service.issue(user)

        logger.info("User logged in: %s", user.id)
        return user, token

    async def logout(self, token: str) -> None:
        async with self._uow:
            await self._token_service.revoke(token)
        logger.debug("Token revoked")
