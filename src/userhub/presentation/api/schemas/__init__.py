"""API request and response schemas."""

from userhub.presentation.api.schemas.auth import LoginRequest, LoginResponse
from userhub.presentation.api.schemas.common import (
    ErrorResponse,
    HealthResponse,
    MessageResponse,
)
from userhub.presentation.api.schemas.users import (
    RegisterRequest,
    UserPageResponse,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "RegisterRequest",
    "UserPageResponse",
    "UserResponse",
    "UserUpdateRequest",
]
