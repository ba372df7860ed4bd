"""FastAPI dependencies (composition root for the user service)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_users.application.services.user_service import UserService
from tenant_users.core.config import get_settings
from tenant_users.infrastructure.persistence.database import (
    get_db,
    get_db_transactional,
)
from tenant_users.infrastructure.persistence.repositories import UserRepository
from tenant_users.infrastructure.security.password import BcryptPasswordHasher


def get_password_hasher() -> BcryptPasswordHasher:
    """Password hasher with the configured bcrypt cost."""
    return BcryptPasswordHasher(rounds=get_settings().bcrypt_rounds)


async def get_user_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    hasher: Annotated[BcryptPasswordHasher, Depends(get_password_hasher)],
) -> UserService:
    """UserService for read operations."""
    return UserService(UserRepository(db), hasher)


async def get_user_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    hasher: Annotated[BcryptPasswordHasher, Depends(get_password_hasher)],
) -> UserService:
    """UserService for writes (one transaction per request)."""
    return UserService(UserRepository(db), hasher)
