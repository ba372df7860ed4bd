"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
Every method is scoped to the tenant bound in tenant_users.core.tenant_context;
callers never pass a tenant ID.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tenant_users.domain.entities.user import UserEntity


class IUserRepository(Protocol):
    """Protocol for the tenant-scoped user repository."""

    async def find_by_id(self, user_id: str) -> UserEntity | None:
        """Return user by ID in the current tenant, or None (also for other tenants' IDs)."""

    async def find_by_username_ignore_case(self, username: str) -> UserEntity | None:
        """Return the user whose username matches case-insensitively in the current tenant."""

    async def save(self, user: UserEntity) -> UserEntity:
        """Insert (id is None) or update the user; return it with id and tenant_id set.

        Raises UserAlreadyExistsException when the (tenant, username) index rejects the write.
        """

    async def delete(self, user: UserEntity) -> None:
        """Delete the user from the current tenant."""

    async def find_all(self) -> list[UserEntity]:
        """Return every user in the current tenant, in store order."""
