"""Pytest configuration and fixtures for tenant_users.

Repository and API tests run against a throwaway SQLite file (aiosqlite)
per test; the schema is created with Base.metadata.create_all.
"""

import os

# Cheap bcrypt cost for tests; read by get_settings() on first use.
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from collections.abc import AsyncIterator, Callable

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from tenant_users.core.config import get_settings
from tenant_users.infrastructure.persistence.database import (
    Base,
    create_tables,
    dispose_engine,
)
from tenant_users.infrastructure.persistence import models  # noqa: F401
from tenant_users.infrastructure.security.password import BcryptPasswordHasher
from tenant_users.main import create_app


class FakePasswordHasher:
    """Deterministic IPasswordHasher for unit tests (never returns the plaintext)."""

    def hash_password(self, password: str) -> str:
        return f"hashed::{password[::-1]}::{len(password)}"


@pytest.fixture
def fake_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def bcrypt_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
async def db_session(tmp_path) -> AsyncIterator[AsyncSession]:
    """Database session on a fresh SQLite file. Rolls back after test."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'repo.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(
        bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    async with session_factory() as session:
        yield session
        await session.rollback()
    await engine.dispose()


@pytest.fixture
async def client(tmp_path, monkeypatch) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against a fresh app (ASGI) backed by a SQLite file."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'api.db'}")
    get_settings.cache_clear()
    await dispose_engine()
    await create_tables()
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    await dispose_engine()
    get_settings.cache_clear()


@pytest.fixture
def tenant_headers() -> Callable[[str], dict[str, str]]:
    """Return a builder for headers that bind a tenant for one request."""

    def _build(tenant_id: str) -> dict[str, str]:
        return {get_settings().tenant_header_name: tenant_id}

    return _build
