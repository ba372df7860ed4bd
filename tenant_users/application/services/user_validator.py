"""Tenant-scoped username uniqueness checks for create and update.

These are pre-checks that give a field-level error; the unique index on
(tenant_id, username_normalized) is what actually enforces uniqueness.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tenant_users.domain.exceptions import FieldViolation

if TYPE_CHECKING:
    from tenant_users.application.interfaces.repositories import IUserRepository

USERNAME_FIELD = "username"
USERNAME_TAKEN_MESSAGE = "username already exists"


async def validate_create(
    user_repo: IUserRepository, username: str
) -> list[FieldViolation]:
    """Return a username violation if any user in the current tenant already has username."""
    existing = await user_repo.find_by_username_ignore_case(username)
    if existing is not None:
        return [FieldViolation(USERNAME_FIELD, USERNAME_TAKEN_MESSAGE)]
    return []


async def validate_update(
    user_repo: IUserRepository, user_id: str, username: str
) -> list[FieldViolation]:
    """Return a username violation if another user (not user_id) already has username.

    Keeping one's own username, in any case, is allowed.
    """
    existing = await user_repo.find_by_username_ignore_case(username)
    if existing is not None and existing.id != user_id:
        return [FieldViolation(USERNAME_FIELD, USERNAME_TAKEN_MESSAGE)]
    return []
