"""Unit of work port.

Groups the store mutations of one use case into a single transaction:
leaving the ``async with`` block normally commits, leaving it with an
exception rolls back and re-raises.
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional


class UnitOfWork(ABC):
    async def __aenter__(self) -> "UnitOfWork":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if exc_type is None:
            await self.commit()
        else:
            await self.rollback()

    @abstractmethod
    async def commit(self) -> None:
        """Make all pending changes durable."""

    @abstractmethod
    async def rollback(self) -> None:
        """Discard all pending changes."""
