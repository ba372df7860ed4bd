"""Application services."""

from tenant_users.application.services.user_service import UserService
from tenant_users.application.services.user_validator import (
    validate_create,
    validate_update,
)

__all__ = ["UserService", "validate_create", "validate_update"]
