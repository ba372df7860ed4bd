"""Unit tests for UserEntity rules."""

import pytest

from tenant_users.domain.entities.user import UserEntity
from tenant_users.domain.exceptions import ValidationException


@pytest.mark.parametrize(
    ("kwargs", "field"),
    [
        ({"username": " ", "hashed_password": "h", "roles": ["r"]}, "username"),
        ({"username": "alice", "hashed_password": "", "roles": ["r"]}, "password"),
        ({"username": "alice", "hashed_password": "h", "roles": []}, "roles"),
    ],
)
def test_invalid_entity_rejected(kwargs: dict, field: str) -> None:
    with pytest.raises(ValidationException) as exc_info:
        UserEntity(**kwargs)
    assert exc_info.value.details["violations"][0]["field"] == field


def test_change_profile_keeps_password_and_tenant() -> None:
    user = UserEntity(
        id="u1", tenant_id="acme", username="alice", hashed_password="h", roles=["admin"]
    )
    user.change_profile("alicia", ["user"])
    assert (user.username, user.roles) == ("alicia", ["user"])
    assert (user.id, user.tenant_id, user.hashed_password) == ("u1", "acme", "h")


def test_equality_by_id() -> None:
    a = UserEntity(id="u1", username="alice", hashed_password="h", roles=["r"])
    b = UserEntity(id="u1", username="other", hashed_password="x", roles=["s"])
    unsaved = UserEntity(username="alice", hashed_password="h", roles=["r"])
    assert a == b
    assert unsaved != UserEntity(username="alice", hashed_password="h", roles=["r"])
