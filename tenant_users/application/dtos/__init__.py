"""Application DTOs (transfer objects, no ORM dependency)."""

from tenant_users.application.dtos.user import UserDTO

__all__ = ["UserDTO"]
