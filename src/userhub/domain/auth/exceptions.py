"""Authentication exceptions.

Raised by the authentication service and translated to 401/403 responses
at the API boundary.
"""

from userhub.domain.shared.exceptions import DomainException, ErrorCode


class InvalidCredentialsError(DomainException):
    """Raised when email or password is incorrect during login."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, code=ErrorCode.AUTHENTICATION_FAILURE)


class InactiveAccountError(DomainException):
    """Raised when the credentials match an account that is not activated yet."""

    def __init__(self, message: str = "Account is not activated"):
        super().__init__(message, code=ErrorCode.INACTIVE_AUTHENTICATION_FAILURE)
