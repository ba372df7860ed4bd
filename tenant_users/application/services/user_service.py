"""User application service: tenant-scoped CRUD with username pre-checks."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from tenant_users.application.dtos.user import UserDTO
from tenant_users.application.mappers.user import to_record, to_transfer_object
from tenant_users.application.services.user_validator import (
    validate_create,
    validate_update,
)
from tenant_users.domain.exceptions import (
    ResourceNotFoundException,
    ValidationException,
)

if TYPE_CHECKING:
    from tenant_users.application.interfaces.repositories import IUserRepository
    from tenant_users.application.interfaces.services import IPasswordHasher
    from tenant_users.domain.entities.user import UserEntity


class UserService:
    """Create, update, delete and read users of the tenant bound in context.

    Errors (ValidationException, ResourceNotFoundException,
    UserAlreadyExistsException) propagate unchanged to the caller.
    """

    def __init__(
        self, user_repo: IUserRepository, password_hasher: IPasswordHasher
    ) -> None:
        self._user_repo = user_repo
        self._password_hasher = password_hasher

    async def create(self, dto: UserDTO) -> UserDTO:
        """Create a user in the current tenant. Raises ValidationException if username is taken."""
        violations = await validate_create(self._user_repo, dto.username)
        if violations:
            raise ValidationException(violations=violations)
        # bcrypt is CPU-bound; keep it off the event loop
        record = await asyncio.to_thread(to_record, dto, self._password_hasher)
        saved = await self._user_repo.save(record)
        return to_transfer_object(saved)

    async def update(self, user_id: str, dto: UserDTO) -> UserDTO:
        """Change username and roles of user_id. Password and tenant are not modified."""
        violations = await validate_update(self._user_repo, user_id, dto.username)
        if violations:
            raise ValidationException(violations=violations)
        user = await self._get_or_raise(user_id)
        user.change_profile(dto.username, dto.roles)
        saved = await self._user_repo.save(user)
        return to_transfer_object(saved)

    async def delete(self, user_id: str) -> None:
        """Delete user_id. Raises ResourceNotFoundException if absent in this tenant."""
        user = await self._get_or_raise(user_id)
        await self._user_repo.delete(user)

    async def find_by_id(self, user_id: str) -> UserDTO:
        """Return user_id. Raises ResourceNotFoundException if absent in this tenant."""
        user = await self._get_or_raise(user_id)
        return to_transfer_object(user)

    async def find_all(self) -> list[UserDTO]:
        """Return all users in the current tenant."""
        users = await self._user_repo.find_all()
        return [to_transfer_object(u) for u in users]

    async def _get_or_raise(self, user_id: str) -> UserEntity:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise ResourceNotFoundException("user", user_id)
        return user
