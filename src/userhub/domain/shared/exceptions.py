"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
entire domain layer. All domain exceptions should inherit from DomainException
to enable centralized exception handling in the presentation layer.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    The values double as message keys in the translation catalogs and are
    part of the public API contract. Should not be changed.
    """

    # Validation Errors (400)
    VALIDATION_FAILURE = "validation_failure"
    ACCOUNT_ACTIVATION_FAILURE = "account_activation_failure"

    # Authentication Errors (401)
    AUTHENTICATION_FAILURE = "authentication_failure"

    # Authorization Errors (403)
    FORBIDDEN = "forbidden"
    UNAUTHORIZED_USER_UPDATE = "unauthorized_user_update"
    UNAUTHORIZED_USER_DELETE = "unauthorized_user_delete"
    INACTIVE_AUTHENTICATION_FAILURE = "inactive_authentication_failure"

    # Not Found Errors (404)
    ENTITY_NOT_FOUND = "entity_not_found"
    USER_NOT_FOUND = "user_not_found"

    # Upstream Errors (502)
    UPSTREAM_DISPATCH_FAILURE = "upstream_dispatch_failure"
    EMAIL_FAILURE = "email_failure"

    # General Errors
    INTERNAL_ERROR = "internal_error"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (used for logs, never sent to clients)
    code
        Stable error code, translated at the API boundary
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation fails.

    ``field_errors`` maps each offending field to a message key, in the
    order the fields were checked.
    """

    def __init__(
        self,
        field_errors: dict[str, str],
        message: str = "Validation failed",
        code: ErrorCode = ErrorCode.VALIDATION_FAILURE,
    ) -> None:
        super().__init__(message, code, {"fields": dict(field_errors)})
        self.field_errors = dict(field_errors)


class ForbiddenError(DomainException):
    """Raised when the caller may not act on the addressed resource."""

    def __init__(
        self,
        message: str = "Operation not permitted",
        code: ErrorCode = ErrorCode.FORBIDDEN,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class UpstreamDispatchError(DomainException):
    """Raised when an external dispatch (e-mail, webhook) fails."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UPSTREAM_DISPATCH_FAILURE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
