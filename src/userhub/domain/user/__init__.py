"""User domain - account identity and activation lifecycle.

This domain handles:
- User aggregate (identity, credential hash, activation state)
- Repository interface (implementation in infrastructure)

Design notes:
- User id is an integer assigned by the store on insert
- A user starts inactive with a one-shot activation token
- Activation is a one-way transition that clears the token
"""

from userhub.domain.user.aggregates import User
from userhub.domain.user.exceptions import (
    ActivationEmailError,
    EmailAlreadyExistsError,
    InvalidActivationTokenError,
    UserAlreadyActiveError,
    UserNotFoundError,
)
from userhub.domain.user.repositories import UserRepository

__all__ = [
    "ActivationEmailError",
    "EmailAlreadyExistsError",
    "InvalidActivationTokenError",
    "User",
    "UserAlreadyActiveError",
    "UserNotFoundError",
    "UserRepository",
]
