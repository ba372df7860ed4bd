"""Domain layer: entities and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from tenant_users.domain.entities import UserEntity
from tenant_users.domain.exceptions import (
    FieldViolation,
    ResourceNotFoundException,
    TenantContextMissingException,
    UserAlreadyExistsException,
    UserServiceException,
    ValidationException,
)

__all__ = [
    # Entities
    "UserEntity",
    # Exceptions
    "FieldViolation",
    "ResourceNotFoundException",
    "TenantContextMissingException",
    "UserAlreadyExistsException",
    "UserServiceException",
    "ValidationException",
]
