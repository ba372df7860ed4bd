"""Domain exceptions for the user service.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FieldViolation:
    """A single field-level validation failure (field name + message)."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class UserServiceException(Exception):
    """Base exception for all user service errors.

    All custom exceptions inherit from this class so the presentation layer
    can map them to responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. violations, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the error envelope used in API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(UserServiceException):
    """Raised when input fails business validation (e.g. duplicate username).

    Carries one or more field violations; nothing has been written when this
    is raised.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: str | None = None,
        violations: list[FieldViolation] | None = None,
    ) -> None:
        """Initialize with message and either a single field or a violation list.

        Args:
            message: Description of the validation failure.
            field: Optional single field that failed (shorthand for one violation).
            violations: Optional list of field violations.
        """
        items = list(violations or [])
        if field and not items:
            items.append(FieldViolation(field, message))
        self.violations = items
        details: dict[str, Any] = {}
        if items:
            details["violations"] = [v.to_dict() for v in items]
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(UserServiceException):
    """Raised when a requested resource is not found in the current tenant."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'user').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class UserAlreadyExistsException(UserServiceException):
    """Raised when the store rejects a write on the (tenant, username) unique index.

    Surfaces a concurrent duplicate that passed the pre-check but lost the race.
    """

    def __init__(self, username: str | None = None) -> None:
        """Initialize with the conflicting username when known."""
        details = {"field": "username"}
        if username is not None:
            details["username"] = username
        super().__init__(
            "Username already registered in this tenant",
            "USER_ALREADY_EXISTS",
            details,
        )


class TenantContextMissingException(UserServiceException):
    """Raised when a tenant-scoped operation runs without a tenant in context."""

    def __init__(self) -> None:
        super().__init__(
            "No tenant bound to the current request",
            "TENANT_REQUIRED",
        )
