"""Job status registry endpoints."""

from uuid import UUID

from fastapi import APIRouter, status

from src.fieldops.api.dependencies import AdminPrincipal, JobStatusServiceDep, StaffPrincipal
from src.fieldops.schemas.common import ApiResponse, DeletedRead
from src.fieldops.schemas.job_status import (
    JobStatusCreate,
    JobStatusRead,
    JobStatusReorder,
    JobStatusUpdate,
)

router = APIRouter(prefix="/job-statuses", tags=["job-statuses"])


@router.get("", response_model=ApiResponse[list[JobStatusRead]])
async def list_statuses(
    principal: StaffPrincipal, service: JobStatusServiceDep
) -> ApiResponse[list[JobStatusRead]]:
    """Statuses in display order."""
    statuses = await service.list_statuses(principal)
    return ApiResponse(data=[JobStatusRead.model_validate(s) for s in statuses])


@router.post(
    "/reorder",
    response_model=ApiResponse[list[JobStatusRead]],
    responses={400: {"description": "Empty or malformed id list"}},
)
async def reorder_statuses(
    data: JobStatusReorder, principal: AdminPrincipal, service: JobStatusServiceDep
) -> ApiResponse[list[JobStatusRead]]:
    """Rewrite every listed status's index to its position in the list."""
    statuses = await service.reorder_statuses(principal, data.status_ids)
    return ApiResponse(
        data=[JobStatusRead.model_validate(s) for s in statuses],
        message="Statuses reordered successfully",
    )


@router.get(
    "/{status_id}",
    response_model=ApiResponse[JobStatusRead],
    responses={404: {"description": "Job status not found"}},
)
async def get_status(
    status_id: UUID, principal: StaffPrincipal, service: JobStatusServiceDep
) -> ApiResponse[JobStatusRead]:
    job_status = await service.get_status(principal, status_id)
    return ApiResponse(data=JobStatusRead.model_validate(job_status))


@router.post("", response_model=ApiResponse[JobStatusRead], status_code=status.HTTP_201_CREATED)
async def create_status(
    data: JobStatusCreate, principal: AdminPrincipal, service: JobStatusServiceDep
) -> ApiResponse[JobStatusRead]:
    job_status = await service.create_status(principal, data)
    return ApiResponse(
        data=JobStatusRead.model_validate(job_status), message="Status created successfully"
    )


@router.patch(
    "/{status_id}",
    response_model=ApiResponse[JobStatusRead],
    responses={404: {"description": "Job status not found"}},
)
async def update_status(
    status_id: UUID,
    data: JobStatusUpdate,
    principal: AdminPrincipal,
    service: JobStatusServiceDep,
) -> ApiResponse[JobStatusRead]:
    job_status = await service.update_status(principal, status_id, data)
    return ApiResponse(
        data=JobStatusRead.model_validate(job_status), message="Status updated successfully"
    )


@router.delete(
    "/{status_id}",
    response_model=ApiResponse[DeletedRead],
    responses={
        404: {"description": "Job status not found"},
        409: {"description": "Status is in use by at least one job"},
    },
)
async def delete_status(
    status_id: UUID, principal: AdminPrincipal, service: JobStatusServiceDep
) -> ApiResponse[DeletedRead]:
    await service.delete_status(principal, status_id)
    return ApiResponse(data=DeletedRead(id=status_id), message="Status deleted successfully")
