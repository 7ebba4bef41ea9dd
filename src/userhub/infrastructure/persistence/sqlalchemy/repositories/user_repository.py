"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from userhub.domain.user import EmailAlreadyExistsError, User, UserRepository
from userhub.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)

# Range of the integer primary key column
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Changes are flushed, never committed; the unit of work owns the
    transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: int) -> Optional[User]:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_active_by_id(self, user_id: int) -> Optional[User]:
        if not ID_MIN <= user_id <= ID_MAX:
            return None

        stmt = select(UserModel).where(
            UserModel.id == user_id,
            UserModel.inactive.is_(False),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: str) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_activation_token(self, token: str) -> Optional[User]:
        stmt = select(UserModel).where(
            UserModel.activation_token == token,
            UserModel.inactive.is_(True),
        )
        result = await self._session.execute(stmt)
        model = result.scalars().first()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_email(self, email: str) -> bool:
        stmt = select(func.count()).select_from(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    async def save(self, user: User) -> User:
        existing = None
        if user.id is not None:
            existing = await self._find_model_by_id(user.id)

        try:
            if existing:
                self._update_model(existing, user)
                await self._session.flush()
                logger.debug("Updated user: %s", user.id)
                return self._map_to_domain(existing)

            model = self._map_to_model(user)
            self._session.add(model)
            await self._session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise EmailAlreadyExistsError(user.email) from e
            raise

        logger.info("Created user: %s (email: %s)", model.id, model.email)
        return self._map_to_domain(model)

    async def find_active_page(
        self,
        offset: int,
        limit: int,
        exclude_id: Optional[int] = None,
    ) -> tuple[list[User], int]:
        conditions = [UserModel.inactive.is_(False)]
        if exclude_id is not None:
            conditions.append(UserModel.id != exclude_id)

        count_stmt = select(func.count()).select_from(UserModel).where(*conditions)
        total = (await self._session.execute(count_stmt)).scalar_one()

        stmt = (
            select(UserModel)
            .where(*conditions)
            .order_by(UserModel.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()
        return [self._map_to_domain(model) for model in models], total

    async def delete(self, user_id: int) -> None:
        model = await self._find_model_by_id(user_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.info("Deleted user: %s", user_id)

    async def _find_model_by_id(self, user_id: int) -> Optional[UserModel]:
        if not ID_MIN <= user_id <= ID_MAX:
            return None
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            username=model.username,
            email=model.email,
            password_hash=model.password_hash,
            inactive=model.inactive,
            activation_token=model.activation_token,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            inactive=user.inactive,
            activation_token=user.activation_token,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.username = user.username
        model.inactive = user.inactive
        model.activation_token = user.activation_token
        model.updated_at = user.updated_at
