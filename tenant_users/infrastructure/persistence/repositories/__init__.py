"""Tenant-scoped repositories."""

from tenant_users.infrastructure.persistence.repositories.base import (
    TenantScopedRepository,
)
from tenant_users.infrastructure.persistence.repositories.user_repo import (
    UserRepository,
)

__all__ = ["TenantScopedRepository", "UserRepository"]
