"""Unit tests for the per-request tenant context."""

import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest

from tenant_users.core.tenant_context import (
    get_tenant_id,
    require_tenant_id,
    reset_tenant_id,
    set_tenant_id,
    tenant_scope,
)
from tenant_users.core.tenant_validation import is_valid_tenant_id_format
from tenant_users.domain.exceptions import TenantContextMissingException


def test_unset_context_has_no_fallback_tenant() -> None:
    assert get_tenant_id() is None
    with pytest.raises(TenantContextMissingException) as exc_info:
        require_tenant_id()
    assert exc_info.value.error_code == "TENANT_REQUIRED"


def test_set_and_reset_restores_previous_value() -> None:
    token = set_tenant_id("acme")
    try:
        assert require_tenant_id() == "acme"
        inner = set_tenant_id("globex")
        assert get_tenant_id() == "globex"
        reset_tenant_id(inner)
        assert get_tenant_id() == "acme"
    finally:
        reset_tenant_id(token)
    assert get_tenant_id() is None


@pytest.mark.parametrize("value", ["", "   "])
def test_set_rejects_empty_tenant(value: str) -> None:
    with pytest.raises(ValueError, match="non-empty"):
        set_tenant_id(value)


def test_tenant_scope_resets_on_exception() -> None:
    with pytest.raises(RuntimeError):
        with tenant_scope("acme"):
            assert get_tenant_id() == "acme"
            raise RuntimeError("boom")
    assert get_tenant_id() is None


async def test_concurrent_tasks_do_not_see_each_others_tenant() -> None:
    """Each task keeps its own tenant across awaits while others run."""

    async def handle(tenant_id: str) -> list[str | None]:
        seen = []
        with tenant_scope(tenant_id):
            for _ in range(5):
                await asyncio.sleep(0)
                seen.append(get_tenant_id())
        return seen

    tenants = [f"tenant-{i}" for i in range(10)]
    results = await asyncio.gather(*(handle(t) for t in tenants))
    for tenant_id, seen in zip(tenants, results):
        assert seen == [tenant_id] * 5
    assert get_tenant_id() is None


def test_threads_do_not_share_tenant() -> None:
    def handle(tenant_id: str) -> str:
        with tenant_scope(tenant_id):
            return require_tenant_id()

    with tenant_scope("main-thread"):
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(handle, ["a", "b", "c", "d"]))
        assert get_tenant_id() == "main-thread"
    assert results == ["a", "b", "c", "d"]


class TestTenantIdFormat:
    def test_accepts_simple_ids(self) -> None:
        assert is_valid_tenant_id_format("acme")
        assert is_valid_tenant_id_format("tenant_01-x")

    def test_rejects_empty_and_none(self) -> None:
        assert not is_valid_tenant_id_format("")
        assert not is_valid_tenant_id_format(None)

    def test_rejects_bad_characters(self) -> None:
        assert not is_valid_tenant_id_format("acme corp")
        assert not is_valid_tenant_id_format("acme';--")

    def test_rejects_too_long(self) -> None:
        assert not is_valid_tenant_id_format("a" * 65)
        assert is_valid_tenant_id_format("a" * 64)
