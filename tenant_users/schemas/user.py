"""User API schemas."""

from pydantic import BaseModel, Field, field_validator

from tenant_users.application.dtos.user import UserDTO


def _strip_required(value: str, name: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError(f"{name} is required")
    return value


class UserCreateRequest(BaseModel):
    """Request body for creating a user in the caller's tenant. Any id in the body is ignored."""

    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=1024)
    roles: list[str] = Field(..., min_length=1)

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, v: str) -> str:
        return _strip_required(v, "username")

    @field_validator("password")
    @classmethod
    def password_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("password is required")
        return v

    @field_validator("roles")
    @classmethod
    def roles_not_blank(cls, v: list[str]) -> list[str]:
        return [_strip_required(r, "role") for r in v]

    def to_dto(self) -> UserDTO:
        return UserDTO(username=self.username, password=self.password, roles=self.roles)


class UserUpdateRequest(BaseModel):
    """Request body for PUT /users/{id}: username and roles only (password is not changed here)."""

    username: str = Field(..., min_length=1, max_length=255)
    roles: list[str] = Field(..., min_length=1)

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, v: str) -> str:
        return _strip_required(v, "username")

    @field_validator("roles")
    @classmethod
    def roles_not_blank(cls, v: list[str]) -> list[str]:
        return [_strip_required(r, "role") for r in v]

    def to_dto(self) -> UserDTO:
        return UserDTO(username=self.username, roles=self.roles)


class UserResponse(BaseModel):
    """User response. password is always null."""

    id: str
    username: str
    password: None = None
    roles: list[str]

    @classmethod
    def from_dto(cls, dto: UserDTO) -> "UserResponse":
        return cls(id=dto.id, username=dto.username, roles=dto.roles)
