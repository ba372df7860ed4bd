"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass, field


@dataclass
class UserDTO:
    """User transfer object used at the request/response boundary.

    password is write-only: read from input, always None on output.
    id is ignored on create; update takes the id from the route.
    """

    username: str
    roles: list[str] = field(default_factory=list)
    password: str | None = field(default=None, repr=False)
    id: str | None = None
