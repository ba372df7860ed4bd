"""Application ports (repository and service protocols)."""

from tenant_users.application.interfaces.repositories import IUserRepository
from tenant_users.application.interfaces.services import IPasswordHasher

__all__ = ["IPasswordHasher", "IUserRepository"]
