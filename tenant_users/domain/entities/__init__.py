"""Domain entities.

Pure domain models; no ORM or persistence concerns.
"""

from tenant_users.domain.entities.user import UserEntity

__all__ = ["UserEntity"]
