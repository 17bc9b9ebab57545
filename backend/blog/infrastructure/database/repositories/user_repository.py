"""Concrete user repository backed by SQLAlchemy."""

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.application.interfaces import UserRepository
from blog.domain.entities import User
from blog.domain.exceptions import EntityNotFoundError
from blog.infrastructure.database.models import UserModel

_UPDATABLE = ("name", "username", "password", "email", "avatar", "bio")


class SQLAlchemyUserRepository(UserRepository):
    """Implements the UserRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            username=model.username,
            password=model.password,
            email=model.email,
            avatar=model.avatar,
            bio=model.bio,
            created_at=model.created_at,
        )

    async def get_by_id(self, user_id: int) -> User | None:
        result = await self._session.get(UserModel, user_id)
        return self._to_entity(result) if result else None

    async def get_by_username(self, username: str) -> User | None:
        result = await self._session.execute(select(UserModel).where(UserModel.username == username))
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def count(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(UserModel))
        return result.scalar_one()

    async def create(self, user: User) -> User:
        model = UserModel(
            name=user.name,
            username=user.username,
            password=user.password,
            email=user.email,
            avatar=user.avatar,
            bio=user.bio,
            created_at=user.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update_fields(self, user_id: int, values: dict[str, Any]) -> User:
        model = await self._session.get(UserModel, user_id)
        if model is None:
            raise EntityNotFoundError("User", user_id)
        for name, value in values.items():
            if name not in _UPDATABLE:
                raise ValueError(f"Column '{name}' cannot be updated")
            setattr(model, name, value)
        await self._session.flush()
        return self._to_entity(model)
