"""User domain exceptions."""

from typing import Optional

from userhub.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    UpstreamDispatchError,
)


class UserNotFoundError(EntityNotFoundError):
    """User not found (or filtered out because it is not active)."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(
            f"User not found: {user_id}",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": user_id},
        )


class EmailAlreadyExistsError(Exception):
    """Email already registered.

    Raised by repositories on a unique constraint violation; the user
    service turns it into a field-level validation error.
    """

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email already registered: {email}")


class InvalidActivationTokenError(DomainException):
    """No inactive account carries the given activation token."""

    def __init__(self) -> None:
        super().__init__(
            "Activation token is unknown or already used",
            code=ErrorCode.ACCOUNT_ACTIVATION_FAILURE,
        )


class UserAlreadyActiveError(Exception):
    """Activation attempted on an account that is already active."""

    def __init__(self, user_id: Optional[int]) -> None:
        self.user_id = user_id
        super().__init__(f"User already active: {user_id}")


class ActivationEmailError(UpstreamDispatchError):
    """The account activation e-mail could not be sent."""

    def __init__(self, email: str) -> None:
        super().__init__(
            f"Failed to send activation email to {email}",
            code=ErrorCode.EMAIL_FAILURE,
            details={"email": email},
        )
