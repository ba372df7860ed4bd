"""User repository (implements IUserRepository). Methods take and return domain entities."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_users.domain.entities.user import UserEntity
from tenant_users.domain.exceptions import (
    ResourceNotFoundException,
    UserAlreadyExistsException,
)
from tenant_users.infrastructure.persistence.models.user import (
    User,
    normalize_username,
)
from tenant_users.infrastructure.persistence.repositories.base import (
    TenantScopedRepository,
)

logger = logging.getLogger(__name__)


def _user_to_entity(u: User) -> UserEntity:
    """Map ORM User to domain UserEntity."""
    return UserEntity(
        id=u.id,
        tenant_id=u.tenant_id,
        username=u.username,
        hashed_password=u.hashed_password,
        roles=list(u.roles or []),
    )


class UserRepository(TenantScopedRepository[User]):
    """Tenant-scoped user repository.

    Unique violations on (tenant_id, username_normalized) are raised as
    UserAlreadyExistsException; the transaction is rolled back by the caller's
    session scope.
    """

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def find_by_id(self, user_id: str) -> UserEntity | None:
        user = await self._get_row(user_id)
        return _user_to_entity(user) if user else None

    async def find_by_username_ignore_case(self, username: str) -> UserEntity | None:
        result = await self.db.execute(
            self._scoped().where(
                User.username_normalized == normalize_username(username)
            )
        )
        user = result.scalars().first()
        return _user_to_entity(user) if user else None

    async def find_all(self) -> list[UserEntity]:
        return [_user_to_entity(u) for u in await self._list_rows()]

    async def save(self, user: UserEntity) -> UserEntity:
        """Insert when user.id is None, otherwise update username and roles."""
        if user.id is None:
            return await self._insert(user)
        return await self._update(user)

    async def delete(self, user: UserEntity) -> None:
        row = await self._get_row(user.id) if user.id else None
        if row is None:
            raise ResourceNotFoundException("user", str(user.id))
        await self._remove(row)

    async def _insert(self, user: UserEntity) -> UserEntity:
        row = User(
            username=user.username,
            username_normalized=normalize_username(user.username),
            hashed_password=user.hashed_password,
            roles=list(user.roles),
        )
        try:
            created = await self._add(row)
        except IntegrityError as e:
            logger.info("Rejected duplicate username on insert: %s", e.orig)
            raise UserAlreadyExistsException(user.username) from e
        return _user_to_entity(created)

    async def _update(self, user: UserEntity) -> UserEntity:
        assert user.id is not None
        row = await self._get_row(user.id)
        if row is None:
            raise ResourceNotFoundException("user", user.id)
        row.username = user.username
        row.username_normalized = normalize_username(user.username)
        row.roles = list(user.roles)
        try:
            updated = await self._flush_update(row)
        except IntegrityError as e:
            logger.info("Rejected duplicate username on update: %s", e.orig)
            raise UserAlreadyExistsException(user.username) from e
        return _user_to_entity(updated)
