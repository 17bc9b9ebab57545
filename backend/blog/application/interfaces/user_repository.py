"""Port for administrator accounts."""

from abc import ABC, abstractmethod
from typing import Any

from blog.domain.entities import User


class UserRepository(ABC):

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User | None:
        ...

    @abstractmethod
    async def get_by_username(self, username: str) -> User | None:
        ...

    @abstractmethod
    async def count(self) -> int:
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        ...

    @abstractmethod
    async def update_fields(self, user_id: int, values: dict[str, Any]) -> User:
        ...
