"""Shared domain building blocks."""

from userhub.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    UpstreamDispatchError,
    ValidationError,
)
from userhub.domain.shared.time import epoch_millis, utc_now

__all__ = [
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ForbiddenError",
    "UpstreamDispatchError",
    "ValidationError",
    "epoch_millis",
    "utc_now",
]
