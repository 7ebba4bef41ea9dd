"""Unit tests for AuthenticationService."""

from unittest.mock import AsyncMock, Mock

import pytest

from userhub.application.services import AuthenticationService, TokenService
from userhub.domain.auth import InactiveAccountError, InvalidCredentialsError
from userhub.domain.shared.time import utc_now
from userhub.domain.user import User, UserRepository
from userhub.infrastructure.security import PasswordHashingService

TEST_EMAIL = "user1@mail.com"
TEST_PASSWORD = "P4ssword"


def _user(inactive: bool = False) -> User:
    return User.reconstitute(
        id=1,
        username="user1",
        email=TEST_EMAIL,
        password_hash="hashed",
        inactive=inactive,
        activation_token="t" * 32 if inactive else None,
        created_at=utc_now(),
        updated_at=utc_now(),
    )


class TestAuthenticationServiceLogin:
    @pytest.fixture(autouse=True)
    def setup(self, uow):
        self.uow = uow
        self.user_repo = AsyncMock(spec=UserRepository)
        self.token_service = AsyncMock(spec=TokenService)
        self.password_service = Mock(spec=PasswordHashingService)

        self.service = AuthenticationService(
            user_repository=self.user_repo,
            token_service=self.token_service,
            password_service=self.password_service,
            unit_of_work=self.uow,
        )

    @pytest.mark.asyncio
    async def test_login_returns_user_and_token(self):
        user = _user()
        self.user_repo.find_by_email.return_value = user
        self.password_service.verify.return_value = True
        self.token_service.issue.return_value = "token"

        result_user, token = await self.service.login(TEST_EMAIL, TEST_PASSWORD)

        assert result_user is user
        assert token == "token"
        self.token_service.issue.assert_awaited_once_with(user)
        self.password_service.verify.assert_called_once_with(TEST_PASSWORD, "hashed")
        assert self.uow.commits == 1

    @pytest.mark.asyncio
    async def test_unknown_email_raises_invalid_credentials(self):
        self.user_repo.find_by_email.return_value = None

        with pytest.raises(InvalidCredentialsError):
            await self.service.login("nobody@mail.com", TEST_PASSWORD)

        self.token_service.issue.assert_not_called()

    @pytest.mark.asyncio
    async def test_wrong_password_raises_invalid_credentials(self):
        self.user_repo.find_by_email.return_value = _user()
        self.password_service.verify.return_value = False

        with pytest.raises(InvalidCredentialsError):
            await self.service.login(TEST_EMAIL, "Wrong1234")

        self.token_service.issue.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_password_raises_invalid_credentials(self):
        self.user_repo.find_by_email.return_value = _user()

        with pytest.raises(InvalidCredentialsError):
            await self.service.login(TEST_EMAIL, None)

        self.password_service.verify.assert_not_called()

    @pytest.mark.asyncio
    async def test_inactive_user_with_correct_password_raises_inactive(self):
        self.user_repo.find_by_email.return_value = _user(inactive=True)
        self.password_service.verify.return_value = True

        with pytest.raises(InactiveAccountError):
            await self.service.login(TEST_EMAIL, TEST_PASSWORD)

        self.token_service.issue.assert_not_called()

    @pytest.mark.asyncio
    async def test_inactive_user_with_wrong_password_raises_invalid_credentials(self):
        self.user_repo.find_by_email.return_value = _user(inactive=True)
        self.password_service.verify.return_value = False

        with pytest.raises(InvalidCredentialsError):
            await self.service.login(TEST_EMAIL, "Wrong1234")


class TestAuthenticationServiceLogout:
    @pytest.fixture(autouse=True)
    def setup(self, uow):
        self.uow = uow
        self.token_service = AsyncMock(spec=TokenService)
        self.service = AuthenticationService(
            user_repository=AsyncMock(spec=UserRepository),
            token_service=self.token_service,
            password_service=Mock(spec=PasswordHashingService),
            unit_of_work=self.uow,
        )

    @pytest.mark.asyncio
    async def test_logout_revokes_and_commits(self):
        await self.service.logout("token")

        self.token_service.revoke.assert_awaited_once_with("token")
        assert self.uow.commits == 1
