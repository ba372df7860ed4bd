"""Application layer: interfaces, DTOs, mappers, services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repository, password hasher).
"""

from tenant_users.application.interfaces import IPasswordHasher, IUserRepository
from tenant_users.application.services.user_service import UserService

__all__ = [
    "IPasswordHasher",
    "IUserRepository",
    "UserService",
]
