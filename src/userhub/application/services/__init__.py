"""Application services."""

from userhub.application.services.authentication_service import (
    AuthenticationService,
)
from userhub.application.services.token_service import TokenService, generate_token
from userhub.application.services.user_service import UserService

__all__ = [
    "AuthenticationService",
    "TokenService",
    "UserService",
    "generate_token",
]
