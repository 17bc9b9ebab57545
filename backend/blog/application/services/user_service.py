"""Application service for the administrator account."""

import logging
from typing import Any

from werkzeug.security import check_password_hash, generate_password_hash

from blog.application.interfaces import UserRepository
from blog.domain.entities import User
from blog.domain.exceptions import EntityNotFoundError, NoOpError, ValidationError

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("name", "username", "email", "avatar", "bio")


class UserService:
    """Seeds, reads and updates users. Passwords are only ever stored hashed."""

    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def ensure_default_admin(
        self,
        username: str,
        password: str,
        name: str,
        email: str | None = None,
    ) -> User | None:
        """Create the first administrator when the table is empty. Returns it, or None if users exist."""
        if await self._repository.count() > 0:
            return None
        user = await self._repository.create(
            User(
                name=name,
                username=username,
                password=generate_password_hash(password),
                email=email,
                bio="Default administrator; change the password and profile after first login",
            )
        )
        logger.warning("User table was empty; created default administrator '%s'", username)
        return user

    async def get_user(self, user_id: int) -> User:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    async def update_profile(self, user_id: int, data: dict[str, Any]) -> User:
        """Update only the supplied profile fields."""
        await self.get_user(user_id)
        values = {key: data[key] for key in PROFILE_FIELDS if key in data and data[key] is not None}
        if not values:
            raise NoOpError("User", user_id)
        if "username" in values:
            if not str(values["username"]).strip():
                raise ValidationError("Username must not be empty", field="username")
            other = await self._repository.get_by_username(values["username"])
            if other is not None and other.id != user_id:
                raise ValidationError(f"Username '{values['username']}' is already taken", field="username")
        return await self._repository.update_fields(user_id, values)

    async def change_password(self, user_id: int, current_password: str, new_password: str) -> None:
        user = await self.get_user(user_id)
        if not check_password_hash(user.password, current_password or ""):
            raise ValidationError("Current password is incorrect", field="currPassword")
        if not new_password:
            raise ValidationError("New password must not be empty", field="newPassword")
        await self._repository.update_fields(user_id, {"password": generate_password_hash(new_password)})
        logger.info("Password changed for user %s", user_id)
