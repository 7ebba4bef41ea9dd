"""Field-level validation of user input.

Each field is checked against an ordered list of rules and reports only the
first rule it breaks. The reported values are message keys; translation
happens at the API boundary.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Optional

from email_validator import EmailNotValidError, validate_email

from userhub.domain.shared.exceptions import ValidationError

if TYPE_CHECKING:
    from userhub.domain.user import UserRepository

USERNAME_MIN_LENGTH = 4
USERNAME_MAX_LENGTH = 32
PASSWORD_MIN_LENGTH = 6
# bcrypt rejects longer input
PASSWORD_MAX_BYTES = 72

_PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d).*$", re.DOTALL)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or value == ""


def check_username(username: Optional[str]) -> Optional[str]:
    if _is_blank(username):
        return "blank"
    if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        return "username_size"
    return None


def check_email_syntax(email: Optional[str]) -> Optional[str]:
    if _is_blank(email):
        return "blank"
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return "email_invalid"
    return None


def check_password(password: Optional[str]) -> Optional[str]:
    if _is_blank(password):
        return "blank"
    if len(password) < PASSWORD_MIN_LENGTH:
        return "password_size"
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        return "password_too_long"
    if not _PASSWORD_PATTERN.match(password):
        return "password_pattern"
    return None


class UserInputValidator:
    """Validates registration and update payloads."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def validate_registration(
        self,
        username: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> None:
        """
        Validate a registration payload.

        Raises
        ------
        ValidationError
            With one entry per failing field, in the order
            username, email, password
        """
        errors: dict[str, str] = {}

        username_error = check_username(username)
        if username_error:
            errors["username"] = username_error

        email_error = check_email_syntax(email)
        if email_error is None and await self._user_repo.exists_by_email(email):
            email_error = "email_in_use"
        if email_error:
            errors["email"] = email_error

        password_error = check_password(password)
        if password_error:
            errors["password"] = password_error

        if errors:
            raise ValidationError(errors)

    def validate_update(self, username: Optional[str]) -> None:
        error = check_username(username)
        if error:
            raise ValidationError({"username": error})
