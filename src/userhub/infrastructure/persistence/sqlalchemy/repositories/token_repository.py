"""SQLAlchemy implementation of TokenRepository."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from userhub.domain.auth import TokenRepository
from userhub.infrastructure.persistence.sqlalchemy.models import TokenModel, UserModel


class TokenRepositorySQLAlchemy(TokenRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, token: str, user_id: int) -> None:
        self._session.add(TokenModel(token=token, user_id=user_id))
        await self._session.flush()

    async def find_active_owner_id(self, token: str) -> Optional[int]:
        stmt = (
            select(TokenModel.user_id)
            .join(UserModel, UserModel.id == TokenModel.user_id)
            .where(TokenModel.token == token, UserModel.inactive.is_(False))
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete(self, token: str) -> None:
        stmt = delete(TokenModel).where(TokenModel.token == token)
        await self._session.execute(stmt)
