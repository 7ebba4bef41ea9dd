"""Pytest fixtures for API integration tests."""

from unittest.mock import AsyncMock, Mock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select

from userhub.application.services import generate_token
from userhub.domain.user import User
from userhub.infrastructure.email import EmailService
from userhub.infrastructure.persistence.sqlalchemy import (
    UserModel,
    UserRepositorySQLAlchemy,
)
from userhub.infrastructure.security import PasswordHashingService
from userhub.presentation.api.app import API_V1_PREFIX, create_app
from userhub.presentation.api.dependencies import get_db_session, get_email_service
from userhub_config.settings import Settings

DEFAULT_PASSWORD = "P4ssword"


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with fast password hashing."""
    return Settings(
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        password_hash_rounds=4,
        default_language="en",
        smtp_enabled=False,
    )


@pytest.fixture
def email_service() -> Mock:
    service = Mock(spec=EmailService)
    service.send_account_activation_email = AsyncMock(return_value=None)
    return service


@pytest.fixture
def app(api_settings, test_session_maker, email_service):
    """Create the app with an in-memory database and a mocked mailer."""
    app = create_app(settings=api_settings)

    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_email_service] = lambda: email_service

    return app


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def add_user(test_session_maker):
    """Insert users directly, bypassing registration."""
    password_service = PasswordHashingService(rounds=4)

    async def _add_user(
        username: str = "user1",
        email: str = "user1@mail.com",
        password: str = DEFAULT_PASSWORD,
        inactive: bool = False,
    ) -> User:
        async with test_session_maker() as session:
            repo = UserRepositorySQLAlchemy(session)
            user = await repo.save(
                User.register(
                    username=username,
                    email=email,
                    password_hash=password_service.hash(password),
                    activation_token=generate_token(),
                ),
            )
            if not inactive:
                user.activate()
                user = await repo.save(user)
            await session.commit()
            return user

    return _add_user


@pytest.fixture
def add_users(add_user):
    async def _add_users(active_count: int, inactive_count: int = 0) -> list[User]:
        users = []
        for i in range(active_count + inactive_count):
            users.append(
                await add_user(
                    username=f"user{i + 1}",
                    email=f"user{i + 1}@mail.com",
                    inactive=i >= active_count,
                ),
            )
        return users

    return _add_users


@pytest.fixture
def fetch_users(test_session_maker):
    """Read the users table directly."""

    async def _fetch_users() -> list[UserModel]:
        async with test_session_maker() as session:
            result = await session.execute(select(UserModel).order_by(UserModel.id))
            return list(result.scalars().all())

    return _fetch_users


@pytest.fixture
def login(client, api_v1_prefix):
    """Log in and return the issued bearer token (None on failure)."""

    async def _login(email: str = "user1@mail.com", password: str = DEFAULT_PASSWORD):
        response = await client.post(
            f"{api_v1_prefix}/auth",
            json={"email": email, "password": password},
        )
        return response.json().get("token")

    return _login
