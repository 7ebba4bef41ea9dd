"""Session-backed unit of work."""

from sqlalchemy.ext.asyncio import AsyncSession

from userhub.application.ports import UnitOfWork


class SQLAlchemyUnitOfWork(UnitOfWork):
    """Commits or rolls back the request-scoped session.

    Repositories only flush, so everything they did since the last commit
    is covered by one ``commit``/``rollback`` here.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()
