"""Persistence models: ORM entities and mixins."""

from tenant_users.infrastructure.persistence.models.mixins import (
    CuidMixin,
    MultiTenantModel,
    TenantMixin,
    TimestampMixin,
)
from tenant_users.infrastructure.persistence.models.user import User

__all__ = [
    "User",
    "CuidMixin",
    "TenantMixin",
    "TimestampMixin",
    "MultiTenantModel",
]
