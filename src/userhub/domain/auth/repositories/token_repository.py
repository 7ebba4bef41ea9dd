"""Bearer token repository interface."""

from abc import ABC, abstractmethod
from typing import Optional


class TokenRepository(ABC):
    """Storage for opaque bearer tokens, each owned by one user."""

    @abstractmethod
    async def add(self, token: str, user_id: int) -> None:
        """Persist a freshly issued token for ``user_id``."""

    @abstractmethod
    async def find_active_owner_id(self, token: str) -> Optional[int]:
        """
        Resolve a token to its owner.

        Returns
        -------
        The owning user id when the token exists and its owner is active,
        None otherwise
        """

    @abstractmethod
    async def delete(self, token: str) -> None:
        """Remove a token. Unknown tokens are ignored."""
