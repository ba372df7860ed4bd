"""User API: thin routes delegating to UserService.

The tenant is never a route or body parameter; TenantContextMiddleware has
already bound it from the request header.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from tenant_users.api.v1.dependencies import (
    get_user_service,
    get_user_service_for_write,
)
from tenant_users.application.services.user_service import UserService
from tenant_users.schemas.user import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

router = APIRouter()


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(
    body: UserCreateRequest,
    service: Annotated[UserService, Depends(get_user_service_for_write)],
) -> UserResponse:
    """Create a user in the current tenant."""
    created = await service.create(body.to_dto())
    return UserResponse.from_dto(created)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    body: UserUpdateRequest,
    service: Annotated[UserService, Depends(get_user_service_for_write)],
) -> UserResponse:
    """Update username and roles of a user in the current tenant."""
    updated = await service.update(user_id, body.to_dto())
    return UserResponse.from_dto(updated)


@router.delete("/{user_id}", status_code=204)
async def delete_user(
    user_id: str,
    service: Annotated[UserService, Depends(get_user_service_for_write)],
) -> Response:
    """Delete a user in the current tenant."""
    await service.delete(user_id)
    return Response(status_code=204)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """Get user by id (current tenant)."""
    return UserResponse.from_dto(await service.find_by_id(user_id))


@router.get("", response_model=list[UserResponse])
async def list_users(
    service: Annotated[UserService, Depends(get_user_service)],
) -> list[UserResponse]:
    """List users of the current tenant."""
    return [UserResponse.from_dto(u) for u in await service.find_all()]
