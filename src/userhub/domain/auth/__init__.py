"""Auth domain - bearer tokens and login failures."""

from userhub.domain.auth.exceptions import InactiveAccountError, InvalidCredentialsError
from userhub.domain.auth.repositories import TokenRepository

__all__ = [
    "InactiveAccountError",
    "InvalidCredentialsError",
    "TokenRepository",
]
