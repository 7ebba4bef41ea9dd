"""DTOs for user listing and lookup."""

from dataclasses import dataclass
from typing import Any, Optional

from userhub.domain.user import User

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 25
# Largest offset a 64-bit SQL integer can hold
MAX_OFFSET = 2**63 - 1


def _parse_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page number and page size, already clamped to valid ranges."""

    page: int = 0
    size: int = DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def from_params(cls, page: Any = None, size: Any = None) -> "PageRequest":
        """
        Build a page request from raw query values.

        A missing, non-numeric, zero, negative or larger than 25 size
        becomes 10. A missing, non-numeric or negative page becomes 0, and
        so does a page whose offset would overflow a 64-bit integer.
        """
        parsed_size = _parse_int(size)
        if parsed_size is None or parsed_size < 1 or parsed_size > MAX_PAGE_SIZE:
            parsed_size = DEFAULT_PAGE_SIZE

        parsed_page = _parse_int(page)
        if parsed_page is None or parsed_page < 0 or parsed_page * parsed_size > MAX_OFFSET:
            parsed_page = 0

        return cls(page=parsed_page, size=parsed_size)


@dataclass(frozen=True)
class UserSummary:
    """Public projection of a user: no hash, no activation state."""

    id: int
    username: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(id=user.id, username=user.username, email=user.email)


@dataclass(frozen=True)
class UserPage:
    content: list[UserSummary]
    page: int
    size: int
    total_pages: int
