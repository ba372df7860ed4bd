"""End-to-end UserService behaviour against the SQLite-backed repository."""

from unittest.mock import AsyncMock, patch

import pytest

from tenant_users.application.dtos.user import UserDTO
from tenant_users.application.services.user_service import UserService
from tenant_users.core.tenant_context import tenant_scope
from tenant_users.domain.exceptions import (
    FieldViolation,
    ResourceNotFoundException,
    UserAlreadyExistsException,
    ValidationException,
)
from tenant_users.infrastructure.persistence.repositories.user_repo import (
    UserRepository,
)

pytestmark = pytest.mark.requires_db


@pytest.fixture
def repo(db_session) -> UserRepository:
    return UserRepository(db_session)


@pytest.fixture
def service(repo, bcrypt_hasher) -> UserService:
    return UserService(repo, bcrypt_hasher)


def _dto(username: str, password: str | None = "secret123", roles=None) -> UserDTO:
    return UserDTO(username=username, password=password, roles=roles or ["user"])


async def test_acme_globex_alice_scenario(service: UserService) -> None:
    with tenant_scope("acme"):
        acme_alice = await service.create(_dto("alice"))
    with tenant_scope("globex"):
        globex_alice = await service.create(_dto("alice"))
    assert acme_alice.id != globex_alice.id

    with tenant_scope("acme"):
        renamed = await service.update(acme_alice.id, _dto("alice", password=None))
        assert renamed.username == "alice"
        with pytest.raises(ValidationException) as exc_info:
            await service.create(_dto("Alice"))
        assert exc_info.value.violations == [
            FieldViolation("username", "username already exists")
        ]
        assert len(await service.find_all()) == 1


async def test_created_user_has_hashed_password_and_empty_output(
    service: UserService, repo: UserRepository
) -> None:
    with tenant_scope("acme"):
        created = await service.create(_dto("alice"))
        stored = await repo.find_by_id(created.id)
    assert created.password is None
    assert stored.hashed_password != "secret123"
    assert stored.tenant_id == "acme"


async def test_rename_onto_other_user_leaves_record_unchanged(
    service: UserService,
) -> None:
    with tenant_scope("acme"):
        alice = await service.create(_dto("alice", roles=["admin"]))
        await service.create(_dto("bob"))
        with pytest.raises(ValidationException):
            await service.update(alice.id, _dto("BOB", password=None))
        current = await service.find_by_id(alice.id)
    assert current.username == "alice"
    assert current.roles == ["admin"]


async def test_self_rename_case_change_succeeds(service: UserService) -> None:
    with tenant_scope("acme"):
        alice = await service.create(_dto("alice"))
        await service.create(_dto("bob"))
        updated = await service.update(alice.id, _dto("ALICE", password=None, roles=["a"]))
    assert updated.username == "ALICE"
    assert updated.roles == ["a"]


async def test_cross_tenant_id_behaves_as_missing(service: UserService) -> None:
    with tenant_scope("acme"):
        alice = await service.create(_dto("alice"))
    with tenant_scope("globex"):
        for call in (
            service.find_by_id(alice.id),
            service.update(alice.id, _dto("mallory", password=None)),
            service.delete(alice.id),
        ):
            with pytest.raises(ResourceNotFoundException) as exc_info:
                await call
            assert exc_info.value.details["resource_id"] == alice.id
    with tenant_scope("acme"):
        assert (await service.find_by_id(alice.id)).username == "alice"


async def test_lost_race_is_rejected_as_conflict(
    service: UserService, repo: UserRepository
) -> None:
    """A create that passes the pre-check but hits the unique index raises a conflict."""
    with tenant_scope("acme"):
        await service.create(_dto("alice"))
        with patch.object(
            repo, "find_by_username_ignore_case", AsyncMock(return_value=None)
        ):
            with pytest.raises(UserAlreadyExistsException):
                await service.create(_dto("ALICE"))


@pytest.mark.parametrize("duplicate", ["Élodie", "élodie", "ÉLODIE"])
async def test_non_ascii_duplicate_fails_validation(
    service: UserService, duplicate: str
) -> None:
    with tenant_scope("acme"):
        await service.create(_dto("Élodie"))
        with pytest.raises(ValidationException) as exc_info:
            await service.create(_dto(duplicate))
        assert exc_info.value.violations == [
            FieldViolation("username", "username already exists")
        ]
        assert [u.username for u in await service.find_all()] == ["Élodie"]


async def test_rename_onto_non_ascii_username_fails_validation(
    service: UserService,
) -> None:
    with tenant_scope("acme"):
        await service.create(_dto("Élodie"))
        bob = await service.create(_dto("bob"))
        with pytest.raises(ValidationException):
            await service.update(bob.id, _dto("élodie", password=None))
        assert (await service.find_by_id(bob.id)).username == "bob"
