"""Tenant context for tenant-scoped persistence.

Middleware binds the tenant ID of the inbound request in this context
variable; repositories read it on every query. A ContextVar is local to the
current asyncio task (or thread), so concurrent requests never see each
other's tenant.

There is no fallback tenant: reading an unset context through
require_tenant_id() raises TenantContextMissingException.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

from tenant_users.domain.exceptions import TenantContextMissingException

# Current tenant ID for the request (set by middleware, read by repositories).
current_tenant_id: ContextVar[str | None] = ContextVar(
    "current_tenant_id", default=None
)


def set_tenant_id(tenant_id: str) -> Token[str | None]:
    """Bind tenant_id to the current context and return the reset token.

    Raises:
        ValueError: If tenant_id is empty or blank.
    """
    if not tenant_id or not tenant_id.strip():
        raise ValueError("tenant_id must be a non-empty string")
    return current_tenant_id.set(tenant_id)


def reset_tenant_id(token: Token[str | None]) -> None:
    """Restore the tenant value that was current before the matching set."""
    current_tenant_id.reset(token)


def get_tenant_id() -> str | None:
    """Return the current tenant ID if set."""
    return current_tenant_id.get()


def require_tenant_id() -> str:
    """Return the current tenant ID or raise TenantContextMissingException."""
    tenant_id = current_tenant_id.get()
    if not tenant_id:
        raise TenantContextMissingException()
    return tenant_id


@contextmanager
def tenant_scope(tenant_id: str) -> Iterator[str]:
    """Run a block with tenant_id bound; the previous value is restored on exit.

    Usage:
        with tenant_scope("acme"):
            await service.find_all()
    """
    token = set_tenant_id(tenant_id)
    try:
        yield tenant_id
    finally:
        reset_tenant_id(token)
