"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from userhub.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Find a user by id, regardless of activation state.

        Returns
        -------
        User if found, None otherwise
        """

    @abstractmethod
    async def find_active_by_id(self, user_id: int) -> Optional[User]:
        """Find a user by id, only if the account is active."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by exact email address."""

    @abstractmethod
    async def find_by_activation_token(self, token: str) -> Optional[User]:
        """Find the inactive user whose activation token equals ``token``."""

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Save or update a user.

        New users (``user.id is None``) are inserted and returned with the
        store-assigned id. Existing users are updated in place.

        Raises
        ------
        EmailAlreadyExistsError
            If email is already in use by another user
        """

    @abstractmethod
    async def find_active_page(
        self,
        offset: int,
        limit: int,
        exclude_id: Optional[int] = None,
    ) -> tuple[list[User], int]:
        """
        Return one page of active users ordered by insertion, and the total
        number of active users matching the same filter.

        Parameters
        ----------
        offset
            Number of matching users to skip
        limit
            Maximum number of users to return
        exclude_id
            Optional user id left out of both the page and the count
        """

    @abstractmethod
    async def delete(self, user_id: int) -> None:
        """
        Delete a user by id together with its bearer tokens.

        Deleting an unknown id is a no-op.
        """
