"""Security: password hashing."""

from tenant_users.infrastructure.security.password import (
    BcryptPasswordHasher,
    get_password_hash,
)

__all__ = [
    "BcryptPasswordHasher",
    "get_password_hash",
]
