"""Explicit mapping between UserEntity and UserDTO.

The password rule lives here: hashed on the way in, always cleared on the
way out. Both functions are pure; nothing is persisted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tenant_users.application.dtos.user import UserDTO
from tenant_users.domain.entities.user import UserEntity
from tenant_users.domain.exceptions import ValidationException

if TYPE_CHECKING:
    from tenant_users.application.interfaces.services import IPasswordHasher


def to_record(dto: UserDTO, hasher: IPasswordHasher) -> UserEntity:
    """Build a new UserEntity from dto, hashing the password.

    id and tenant_id stay None; the store assigns them on save.

    Raises:
        ValidationException: If the password is missing or the entity is invalid.
    """
    if not dto.password:
        raise ValidationException("password is required", field="password")
    return UserEntity(
        username=dto.username,
        hashed_password=hasher.hash_password(dto.password),
        roles=list(dto.roles),
    )


def to_transfer_object(record: UserEntity) -> UserDTO:
    """Build the outbound UserDTO. password is always None."""
    dto = UserDTO(
        id=record.id,
        username=record.username,
        roles=list(record.roles),
    )
    dto.password = None
    return dto
