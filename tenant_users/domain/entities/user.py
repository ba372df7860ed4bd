"""User domain entity.

Represents a tenant-scoped user account, independent of persistence.
"""

from dataclasses import dataclass, field

from tenant_users.domain.exceptions import ValidationException


@dataclass(eq=False)
class UserEntity:
    """Domain entity for a user account.

    id and tenant_id are None until the store assigns them on first save;
    both are immutable afterwards. Validation runs on construction.
    """

    username: str
    hashed_password: str
    roles: list[str] = field(default_factory=list)
    id: str | None = None
    tenant_id: str | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate user business rules. Raises ValidationException if invalid."""
        if not self.username or not self.username.strip():
            raise ValidationException("username is required", field="username")
        if not self.hashed_password:
            raise ValidationException("password is required", field="password")
        if not self.roles:
            raise ValidationException("roles is required", field="roles")

    def change_profile(self, username: str, roles: list[str]) -> None:
        """Change username and roles; password and tenant are left untouched.

        Raises:
            ValidationException: If the new values break the entity rules.
        """
        previous = (self.username, self.roles)
        self.username = username
        self.roles = list(roles)
        try:
            self.validate()
        except ValidationException:
            self.username, self.roles = previous
            raise

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserEntity):
            return NotImplemented
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
