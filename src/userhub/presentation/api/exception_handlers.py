"""Centralized exception handlers for the FastAPI application.

Domain exceptions are mapped to HTTP responses with one consistent,
translated error format.

Error Response Format:
    {
        "path": "/api/v1/users/5",
        "timestamp": 1700000000000,
        "message": "Translated message",
        "validationErrors": {"field": "Translated message"}   # 400 only
    }

Usage:
    from userhub.presentation.api.exception_handlers import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app, translator)
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from userhub.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    UpstreamDispatchError,
    ValidationError,
)
from userhub.domain.shared.time import epoch_millis
from userhub.infrastructure.i18n import Translator

logger = logging.getLogger(__name__)


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request
    ErrorCode.VALIDATION_FAILURE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ACCOUNT_ACTIVATION_FAILURE: status.HTTP_400_BAD_REQUEST,
    # 401 Unauthorized
    ErrorCode.AUTHENTICATION_FAILURE: status.HTTP_401_UNAUTHORIZED,
    # 403 Forbidden
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.UNAUTHORIZED_USER_UPDATE: status.HTTP_403_FORBIDDEN,
    ErrorCode.UNAUTHORIZED_USER_DELETE: status.HTTP_403_FORBIDDEN,
    ErrorCode.INACTIVE_AUTHENTICATION_FAILURE: status.HTTP_403_FORBIDDEN,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 502 Bad Gateway - external dispatch failed
    ErrorCode.UPSTREAM_DISPATCH_FAILURE: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.EMAIL_FAILURE: status.HTTP_502_BAD_GATEWAY,
    # 500 Internal Server Error
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _get_status_for_exception(exc: DomainException) -> int:
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ForbiddenError):
        return status.HTTP_403_FORBIDDEN
    if isinstance(exc, UpstreamDispatchError):
        return status.HTTP_502_BAD_GATEWAY

    return status.HTTP_400_BAD_REQUEST


def _create_error_response(
    request: Request,
    status_code: int,
    message: str,
    validation_errors: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Create a standardized error response."""
    content: dict = {
        "path": request.url.path,
        "timestamp": epoch_millis(),
        "message": message,
    }
    if validation_errors is not None:
        content["validationErrors"] = validation_errors
    return JSONResponse(status_code=status_code, content=content)


def _field_name(location: tuple) -> str:
    for part in reversed(location):
        if isinstance(part, str):
            return part
    return "body"


def setup_exception_handlers(app: FastAPI, translator: Translator) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    translator
        Translates error codes and field message keys into the language
        negotiated from each request's Accept-Language header
    """

    def _language(request: Request) -> str:
        return translator.negotiate(request.headers.get("accept-language"))

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        language = _language(request)
        logger.warning(
            "Validation failed on %s %s: %s",
            request.method,
            request.url.path,
            exc.field_errors,
        )
        return _create_error_response(
            request,
            status_code=status.HTTP_400_BAD_REQUEST,
            message=translator.translate(exc.code.value, language),
            validation_errors={
                field: translator.translate(key, language)
                for field, key in exc.field_errors.items()
            },
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        language = _language(request)
        not_valid = translator.translate("not_valid", language)
        validation_errors: dict[str, str] = {}
        for error in exc.errors():
            validation_errors.setdefault(_field_name(tuple(error.get("loc", ()))), not_valid)

        logger.warning(
            "Malformed request on %s %s: %s",
            request.method,
            request.url.path,
            list(validation_errors),
        )
        return _create_error_response(
            request,
            status_code=status.HTTP_400_BAD_REQUEST,
            message=translator.translate(ErrorCode.VALIDATION_FAILURE.value, language),
            validation_errors=validation_errors,
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response.

        Logs the full exception details for debugging while returning
        only the translated message to the client.
        """
        status_code = _get_status_for_exception(exc)

        logger.warning(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        return _create_error_response(
            request,
            status_code=status_code,
            message=translator.translate(exc.code.value, _language(request)),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            request,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=translator.translate(
                ErrorCode.INTERNAL_ERROR.value,
                _language(request),
            ),
        )
