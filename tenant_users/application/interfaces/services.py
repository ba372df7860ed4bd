"""Service interfaces (ports) for the application layer."""

from typing import Protocol


class IPasswordHasher(Protocol):
    """Protocol for one-way password hashing."""

    def hash_password(self, password: str) -> str:
        """Return an opaque hash of password; never the plaintext."""
