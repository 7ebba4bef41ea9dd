"""Shared fixtures for application service tests."""

import pytest

from userhub.application.ports import UnitOfWork


class RecordingUnitOfWork(UnitOfWork):
    """Unit of work that records commits and rollbacks instead of touching a store."""

    def __init__(self):
        self.commits = 0
        self.rollbacks = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1


@pytest.fixture
def uow() -> RecordingUnitOfWork:
    return RecordingUnitOfWork()
