"""User account use cases: registration, activation, listing, update, delete."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Optional

from userhub.application.dtos import PageRequest, UserPage, UserSummary
from userhub.application.services.token_service import generate_token
from userhub.domain.shared.exceptions import ValidationError
from userhub.domain.user import (
    ActivationEmailError,
    EmailAlreadyExistsError,
    InvalidActivationTokenError,
    User,
    UserNotFoundError,
)

if TYPE_CHECKING:
    from userhub.application.ports import ActivationNotifier, UnitOfWork
    from userhub.application.validation import UserInputValidator
    from userhub.domain.user import UserRepository
    from userhub.infrastructure.security import PasswordHashingService

logger = logging.getLogger(__name__)


class UserService:
    """
    Application service for user accounts.

    Ownership is not checked here; routes authorize the caller before
    calling ``update`` or ``delete``.
    """

    def __init__(  # noqa: PLR0913
        self,
        user_repository: UserRepository,
        validator: UserInputValidator,
        password_service: PasswordHashingService,
        notifier: ActivationNotifier,
        unit_of_work: UnitOfWork,
    ):
        self._user_repo = user_repository
        self._validator = validator
        self._password_service = password_service
        self._notifier = notifier
        self._uow = unit_of_work

    async def register(
        self,
        username: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> User:
        """
        Register a new, inactive user and send the activation e-mail.

        The insert and the e-mail dispatch form one unit: if the e-mail
        cannot be sent, the insert is rolled back.

        Raises
        ------
        ValidationError
            If any field is invalid or the e-mail is already registered
        ActivationEmailError
            If the activation e-mail could not be sent
        """
        await self._validator.validate_registration(username, email, password)

        user = User.register(
            username=username,
            email=email,
            password_hash=self._password_service.hash(password),
            activation_token=generate_token(),
        )

        try:
            async with self._uow:
                user = await self._user_repo.save(user)
                try:
                    await self._notifier.send_account_activation_email(
                        to_email=user.email,
                        token=user.activation_token,
                    )
                except Exception as e:
                    logger.error("Failed to send activation email to %s: %s", email, e)
                    raise ActivationEmailError(email) from e
        except EmailAlreadyExistsError as e:
            raise ValidationError({"email": "email_in_use"}) from e

        logger.info("User registered: %s (id: %s)", user.email, user.id)
        return user

    async def activate(self, token: str) -> User:
        async with self._uow:
            user = await self._user_repo.find_by_activation_token(token)
            if user is None:
                raise InvalidActivationTokenError
            user.activate()
            user = await self._user_repo.save(user)

        logger.info("User activated: %s", user.id)
        return user

    async def list_active(
        self,
        page_request: PageRequest,
        caller_id: Optional[int] = None,
    ) -> UserPage:
        users, total = await self._user_repo.find_active_page(
            offset=page_request.offset,
            limit=page_request.size,
            exclude_id=caller_id,
        )
        return UserPage(
            content=[UserSummary.from_user(user) for user in users],
            page=page_request.page,
            size=page_request.size,
            total_pages=math.ceil(total / page_request.size),
        )

    async def get_active(self, user_id: int) -> UserSummary:
        user = await self._user_repo.find_active_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return UserSummary.from_user(user)

    async def update(self, user_id: int, username: Optional[str]) -> UserSummary:
        self._validator.validate_update(username)

        async with self._uow:
            user = await self._user_repo.find_by_id(user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            user.rename(username)
            user = await self._user_repo.save(user)

        logger.info("User updated: %s", user_id)
        return UserSummary.from_user(user)

    async def delete(self, user_id: int) -> None:
        async with self._uow:
            await self._user_repo.delete(user_id)
        logger.info("User deleted: %s", user_id)
