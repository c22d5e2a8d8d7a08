"""Customer endpoints. Staff may read; only admins write."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from src.fieldops.api.dependencies import AdminPrincipal, CustomerServiceDep, StaffPrincipal
from src.fieldops.schemas.common import ApiResponse, DeletedRead
from src.fieldops.schemas.customer import CustomerCreate, CustomerRead, CustomerUpdate

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=ApiResponse[list[CustomerRead]])
async def list_customers(
    principal: StaffPrincipal,
    service: CustomerServiceDep,
    search: Annotated[str | None, Query(max_length=255, description="Match name or email")] = None,
) -> ApiResponse[list[CustomerRead]]:
    customers = await service.list_customers(principal, search)
    return ApiResponse(data=[CustomerRead.model_validate(c) for c in customers])


@router.get(
    "/{customer_id}",
    response_model=ApiResponse[CustomerRead],
    responses={404: {"description": "Customer not found"}},
)
async def get_customer(
    customer_id: UUID, principal: StaffPrincipal, service: CustomerServiceDep
) -> ApiResponse[CustomerRead]:
    customer = await service.get_customer(principal, customer_id)
    return ApiResponse(data=CustomerRead.model_validate(customer))


@router.post("", response_model=ApiResponse[CustomerRead], status_code=status.HTTP_201_CREATED)
async def create_customer(
    data: CustomerCreate, principal: AdminPrincipal, service: CustomerServiceDep
) -> ApiResponse[CustomerRead]:
    customer = await service.create_customer(principal, data)
    return ApiResponse(
        data=CustomerRead.model_validate(customer), message="Customer created successfully"
    )


@router.patch(
    "/{customer_id}",
    response_model=ApiResponse[CustomerRead],
    responses={404: {"description": "Customer not found"}},
)
async def update_customer(
    customer_id: UUID,
    data: CustomerUpdate,
    principal: AdminPrincipal,
    service: CustomerServiceDep,
) -> ApiResponse[CustomerRead]:
    customer = await service.update_customer(principal, customer_id, data)
    return ApiResponse(
        data=CustomerRead.model_validate(customer), message="Customer updated successfully"
    )


@router.delete(
    "/{customer_id}",
    response_model=ApiResponse[DeletedRead],
    responses={404: {"description": "Customer not found"}},
)
async def delete_customer(
    customer_id: UUID, principal: AdminPrincipal, service: CustomerServiceDep
) -> ApiResponse[DeletedRead]:
    await service.delete_customer(principal, customer_id)
    return ApiResponse(data=DeletedRead(id=customer_id), message="Customer deleted successfully")
