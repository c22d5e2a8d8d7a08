"""User management endpoints (admin only)."""

from uuid import UUID

from fastapi import APIRouter, status

from src.fieldops.api.dependencies import AdminPrincipal, UserServiceDep
from src.fieldops.schemas.common import ApiResponse, DeletedRead
from src.fieldops.schemas.user import UserCreate, UserRead, UserUpdate

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=ApiResponse[list[UserRead]])
async def list_users(
    principal: AdminPrincipal, service: UserServiceDep
) -> ApiResponse[list[UserRead]]:
    """Users of the caller's tenant, newest first."""
    users = await service.list_users(principal)
    return ApiResponse(data=[UserRead.model_validate(u) for u in users])


@router.get("/workers", response_model=ApiResponse[list[UserRead]])
async def list_workers(
    principal: AdminPrincipal, service: UserServiceDep
) -> ApiResponse[list[UserRead]]:
    """Workers available for assignment, by name."""
    users = await service.list_workers(principal)
    return ApiResponse(data=[UserRead.model_validate(u) for u in users])


@router.get(
    "/{user_id}",
    response_model=ApiResponse[UserRead],
    responses={404: {"description": "User not found"}},
)
async def get_user(
    user_id: UUID, principal: AdminPrincipal, service: UserServiceDep
) -> ApiResponse[UserRead]:
    user = await service.get_user(principal, user_id)
    return ApiResponse(data=UserRead.model_validate(user))


@router.post(
    "",
    response_model=ApiResponse[UserRead],
    status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "Email already registered"}},
)
async def create_user(
    data: UserCreate, principal: AdminPrincipal, service: UserServiceDep
) -> ApiResponse[UserRead]:
    user = await service.create_user(principal, data)
    return ApiResponse(data=UserRead.model_validate(user), message="User created successfully")


@router.patch(
    "/{user_id}",
    response_model=ApiResponse[UserRead],
    responses={
        403: {"description": "Cannot change your own role"},
        404: {"description": "User not found"},
        409: {"description": "Email already registered"},
    },
)
async def update_user(
    user_id: UUID, data: UserUpdate, principal: AdminPrincipal, service: UserServiceDep
) -> ApiResponse[UserRead]:
    user = await service.update_user(principal, user_id, data)
    return ApiResponse(data=UserRead.model_validate(user), message="User updated successfully")


@router.delete(
    "/{user_id}",
    response_model=ApiResponse[DeletedRead],
    responses={
        403: {"description": "Cannot delete your own account"},
        404: {"description": "User not found"},
    },
)
async def delete_user(
    user_id: UUID, principal: AdminPrincipal, service: UserServiceDep
) -> ApiResponse[DeletedRead]:
    await service.delete_user(principal, user_id)
    return ApiResponse(data=DeletedRead(id=user_id), message="User deleted successfully")
