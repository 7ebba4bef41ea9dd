"""Unit tests for UserService."""

from unittest.mock import AsyncMock, Mock

import pytest

from userhub.application.dtos import PageRequest, UserSummary
from userhub.application.ports import ActivationNotifier
from userhub.application.services import UserService
from userhub.application.validation import UserInputValidator
from userhub.domain.shared.exceptions import ValidationError
from userhub.domain.shared.time import utc_now
from userhub.domain.user import (
    ActivationEmailError,
    EmailAlreadyExistsError,
    InvalidActivationTokenError,
    User,
    UserNotFoundError,
    UserRepository,
)
from userhub.infrastructure.security import PasswordHashingService


def _stored(user_id: int, inactive: bool = False, username: str = "user1") -> User:
    return User.reconstitute(
        id=user_id,
        username=username,
        email=f"user{user_id}@mail.com",
        password_hash="hashed",
        inactive=inactive,
        activation_token="t" * 32 if inactive else None,
        created_at=utc_now(),
        updated_at=utc_now(),
    )


def _with_id(user: User) -> User:
    return User.reconstitute(
        id=1,
        username=user.username,
        email=user.email,
        password_hash=user.password_hash,
        inactive=user.inactive,
        activation_token=user.activation_token,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


class UserServiceTestBase:
    @pytest.fixture(autouse=True)
    def setup(self, uow):
        self.uow = uow
        self.user_repo = AsyncMock(spec=UserRepository)
        self.user_repo.exists_by_email.return_value = False
        self.user_repo.save.side_effect = _with_id
        self.password_service = Mock(spec=PasswordHashingService)
        self.password_service.hash.return_value = "hashed"
        self.notifier = AsyncMock(spec=ActivationNotifier)

        self.service = UserService(
            user_repository=self.user_repo,
            validator=UserInputValidator(self.user_repo),
            password_service=self.password_service,
            notifier=self.notifier,
            unit_of_work=self.uow,
        )


class TestUserServiceRegister(UserServiceTestBase):
    @pytest.mark.asyncio
    async def test_register_saves_inactive_user_and_sends_email(self):
        user = await self.service.register("user1", "user1@mail.com", "P4ssword")

        assert user.id == 1
        assert user.inactive is True
        assert user.password_hash == "hashed"
        assert len(user.activation_token) == 32
        self.password_service.hash.assert_called_once_with("P4ssword")
        self.notifier.send_account_activation_email.assert_awaited_once_with(
            to_email="user1@mail.com",
            token=user.activation_token,
        )
        assert self.uow.commits == 1
        assert self.uow.rollbacks == 0

    @pytest.mark.asyncio
    async def test_invalid_input_is_rejected_before_persistence(self):
        with pytest.raises(ValidationError) as exc_info:
            await self.service.register("usr", "user1@mail.com", "P4ssword")

        assert exc_info.value.field_errors == {"username": "username_size"}
        self.user_repo.save.assert_not_called()
        self.notifier.send_account_activation_email.assert_not_called()
        assert self.uow.commits == 0

    @pytest.mark.asyncio
    async def test_email_failure_rolls_back(self):
        self.notifier.send_account_activation_email.side_effect = OSError("smtp down")

        with pytest.raises(ActivationEmailError):
            await self.service.register("user1", "user1@mail.com", "P4ssword")

        self.user_repo.save.assert_awaited_once()
        assert self.uow.rollbacks == 1
        assert self.uow.commits == 0

    @pytest.mark.asyncio
    async def test_unique_violation_becomes_email_in_use(self):
        self.user_repo.save.side_effect = EmailAlreadyExistsError("user1@mail.com")

        with pytest.raises(ValidationError) as exc_info:
            await self.service.register("user1", "user1@mail.com", "P4ssword")

        assert exc_info.value.field_errors == {"email": "email_in_use"}
        assert self.uow.rollbacks == 1
        self.notifier.send_account_activation_email.assert_not_called()

    @pytest.mark.asyncio
    async def test_activation_tokens_differ_between_registrations(self):
        first = await self.service.register("user1", "user1@mail.com", "P4ssword")
        second = await self.service.register("user2", "user2@mail.com", "P4ssword")

        assert first.activation_token != second.activation_token


class TestUserServiceActivate(UserServiceTestBase):
    @pytest.mark.asyncio
    async def test_activate_clears_token_and_commits(self):
        self.user_repo.find_by_activation_token.return_value = _stored(1, inactive=True)
        self.user_repo.save.side_effect = lambda user: user

        user = await self.service.activate("t" * 32)

        assert user.inactive is False
        assert user.activation_token is None
        self.user_repo.find_by_activation_token.assert_awaited_once_with("t" * 32)
        assert self.uow.commits == 1

    @pytest.mark.asyncio
    async def test_unknown_token_raises(self):
        self.user_repo.find_by_activation_token.return_value = None

        with pytest.raises(InvalidActivationTokenError):
            await self.service.activate("unknown")

        self.user_repo.save.assert_not_called()
        assert self.uow.rollbacks == 1


class TestUserServiceListActive(UserServiceTestBase):
    @pytest.mark.asyncio
    async def test_list_returns_page_with_total_pages(self):
        users = [_stored(i, username=f"user{i}") for i in range(1, 11)]
        self.user_repo.find_active_page.return_value = (users, 11)

        page = await self.service.list_active(PageRequest(page=0, size=10))

        assert page.page == 0
        assert page.size == 10
        assert page.total_pages == 2
        assert page.content[0] == UserSummary(id=1, username="user1", email="user1@mail.com")
        self.user_repo.find_active_page.assert_awaited_once_with(
            offset=0,
            limit=10,
            exclude_id=None,
        )

    @pytest.mark.asyncio
    async def test_list_excludes_caller_and_uses_offset(self):
        self.user_repo.find_active_page.return_value = ([], 0)

        page = await self.service.list_active(PageRequest(page=2, size=5), caller_id=3)

        assert page.content == []
        assert page.total_pages == 0
        self.user_repo.find_active_page.assert_awaited_once_with(
            offset=10,
            limit=5,
            exclude_id=3,
        )


class TestUserServiceGetActive(UserServiceTestBase):
    @pytest.mark.asyncio
    async def test_get_active_returns_summary(self):
        self.user_repo.find_active_by_id.return_value = _stored(4)

        summary = await self.service.get_active(4)

        assert summary == UserSummary(id=4, username="user1", email="user4@mail.com")

    @pytest.mark.asyncio
    async def test_missing_or_inactive_user_raises_not_found(self):
        self.user_repo.find_active_by_id.return_value = None

        with pytest.raises(UserNotFoundError):
            await self.service.get_active(4)


class TestUserServiceUpdate(UserServiceTestBase):
    @pytest.mark.asyncio
    async def test_update_renames_user(self):
        self.user_repo.find_by_id.return_value = _stored(1)
        self.user_repo.save.side_effect = lambda user: user

        summary = await self.service.update(1, "user1-updated")

        assert summary.username == "user1-updated"
        assert self.uow.commits == 1

    @pytest.mark.asyncio
    async def test_invalid_username_is_rejected(self):
        with pytest.raises(ValidationError):
            await self.service.update(1, "abc")

        self.user_repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_user_raises_not_found(self):
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError):
            await self.service.update(1, "user1-updated")

        assert self.uow.rollbacks == 1


class TestUserServiceDelete(UserServiceTestBase):
    @pytest.mark.asyncio
    async def test_delete_removes_user_and_commits(self):
        await self.service.delete(1)

        self.user_repo.delete.assert_awaited_once_with(1)
        assert self.uow.commits == 1
