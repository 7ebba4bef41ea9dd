"""Data Transfer Objects for the presentation layer."""

from userhub.application.dtos.user_dto import (
    DEFAULT_PAGE_SIZE,
    MAX_OFFSET,
    MAX_PAGE_SIZE,
    PageRequest,
    UserPage,
    UserSummary,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "MAX_OFFSET",
    "MAX_PAGE_SIZE",
    "PageRequest",
    "UserPage",
    "UserSummary",
]
