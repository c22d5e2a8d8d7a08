"""Job endpoints, plus the job-scoped task, attachment and signature collections.

Static paths are declared before ``/{job_id}`` so they are not captured by it.
"""

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Body, File, Query, UploadFile, status

from src.fieldops.api.dependencies import (
    AdminPrincipal,
    AttachmentServiceDep,
    BroadcasterDep,
    CustomerAccessServiceDep,
    JobServiceDep,
    SignatureServiceDep,
    StaffPrincipal,
    TaskServiceDep,
)
from src.fieldops.core.config import get_settings
from src.fieldops.repositories.tenant import JobFilters
from src.fieldops.schemas.attachment import AttachmentRead
from src.fieldops.schemas.common import ApiResponse, DeletedRead
from src.fieldops.schemas.job import CustomerJobView, JobCreate, JobDetail, JobRead, JobUpdate
from src.fieldops.schemas.signature import SignatureCreate, SignatureRead
from src.fieldops.schemas.task import TaskCreate, TaskRead

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get(
    "/customer/{token}",
    response_model=ApiResponse[CustomerJobView],
    responses={404: {"description": "Job not found"}},
)
async def get_customer_job(
    token: str, service: CustomerAccessServiceDep
) -> ApiResponse[CustomerJobView]:
    """Read-only job view for the holder of its customer link. No login."""
    view = await service.resolve(token)
    return ApiResponse(data=view)


@router.get("/worker/assigned", response_model=ApiResponse[list[JobRead]])
async def list_assigned_jobs(
    principal: StaffPrincipal, service: JobServiceDep
) -> ApiResponse[list[JobRead]]:
    """Active jobs assigned to the caller, soonest scheduled first."""
    jobs = await service.list_assigned_jobs(principal)
    return ApiResponse(data=jobs)


@router.get("", response_model=ApiResponse[list[JobRead]])
async def list_jobs(
    principal: AdminPrincipal,
    service: JobServiceDep,
    status_id: Annotated[UUID | None, Query(alias="statusId")] = None,
    worker_id: Annotated[UUID | None, Query(alias="workerId")] = None,
    customer_id: Annotated[UUID | None, Query(alias="customerId")] = None,
    search: Annotated[str | None, Query(max_length=255)] = None,
    archived: bool | None = None,
) -> ApiResponse[list[JobRead]]:
    """Tenant job list, newest first. Archived jobs are hidden unless asked for."""
    filters = JobFilters(
        status_id=status_id,
        worker_id=worker_id,
        customer_id=customer_id,
        search=search,
        archived=archived,
    )
    jobs = await service.list_jobs(principal, filters)
    return ApiResponse(data=jobs)


@router.post(
    "",
    response_model=ApiResponse[JobRead],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Unknown customer, status or worker"}},
)
async def create_job(
    data: JobCreate,
    principal: AdminPrincipal,
    service: JobServiceDep,
    broadcaster: BroadcasterDep,
) -> ApiResponse[JobRead]:
    job = await service.create_job(principal, data)
    await broadcaster.job_created(job)
    return ApiResponse(data=job, message="Job created successfully")


@router.get(
    "/{job_id}",
    response_model=ApiResponse[JobDetail],
    responses={403: {"description": "Not assigned to this job"}, 404: {"description": "Job not found"}},
)
async def get_job(
    job_id: UUID, principal: StaffPrincipal, service: JobServiceDep
) -> ApiResponse[JobDetail]:
    job = await service.get_job(principal, job_id)
    return ApiResponse(data=job)


@router.patch(
    "/{job_id}",
    response_model=ApiResponse[JobRead],
    responses={
        400: {"description": "Invalid field value or reference"},
        403: {"description": "Field not updatable by this role"},
        404: {"description": "Job not found"},
    },
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": JobUpdate.model_json_schema(by_alias=True)}}
        }
    },
)
async def update_job(
    job_id: UUID,
    payload: Annotated[dict[str, Any], Body()],
    principal: StaffPrincipal,
    service: JobServiceDep,
    broadcaster: BroadcasterDep,
) -> ApiResponse[JobRead]:
    """Partial update. Workers may change only the status of their own jobs.

    The body is taken raw so a worker's keys are checked against its allow-list
    before validation.
    """
    job = await service.update_job(principal, job_id, payload)
    await broadcaster.job_updated(job)
    return ApiResponse(data=job, message="Job updated successfully")


@router.post("/{job_id}/archive", response_model=ApiResponse[JobRead])
async def archive_job(
    job_id: UUID,
    principal: AdminPrincipal,
    service: JobServiceDep,
    broadcaster: BroadcasterDep,
) -> ApiResponse[JobRead]:
    job = await service.set_archived(principal, job_id, True)
    await broadcaster.job_updated(job)
    return ApiResponse(data=job, message="Job archived successfully")


@router.post("/{job_id}/unarchive", response_model=ApiResponse[JobRead])
async def unarchive_job(
    job_id: UUID,
    principal: AdminPrincipal,
    service: JobServiceDep,
    broadcaster: BroadcasterDep,
) -> ApiResponse[JobRead]:
    job = await service.set_archived(principal, job_id, False)
    await broadcaster.job_updated(job)
    return ApiResponse(data=job, message="Job unarchived successfully")


@router.delete(
    "/{job_id}",
    response_model=ApiResponse[DeletedRead],
    responses={404: {"description": "Job not found"}},
)
async def delete_job(
    job_id: UUID,
    principal: AdminPrincipal,
    service: JobServiceDep,
    broadcaster: BroadcasterDep,
) -> ApiResponse[DeletedRead]:
    job = await service.delete_job(principal, job_id)
    await broadcaster.job_deleted(job.tenant_id, job.id)
    return ApiResponse(data=DeletedRead(id=job.id), message="Job deleted successfully")


# Tasks


@router.get("/{job_id}/tasks", response_model=ApiResponse[list[TaskRead]])
async def list_tasks(
    job_id: UUID, principal: StaffPrincipal, service: TaskServiceDep
) -> ApiResponse[list[TaskRead]]:
    """Checklist of a job in creation order."""
    tasks = await service.list_tasks(principal, job_id)
    return ApiResponse(data=tasks)


@router.post(
    "/{job_id}/tasks",
    response_model=ApiResponse[TaskRead],
    status_code=status.HTTP_201_CREATED,
    responses={404: {"description": "Job not found"}},
)
async def create_task(
    job_id: UUID,
    data: TaskCreate,
    principal: AdminPrincipal,
    service: TaskServiceDep,
    broadcaster: BroadcasterDep,
) -> ApiResponse[TaskRead]:
    task = await service.create_task(principal, job_id, data)
    await broadcaster.task_created(task)
    return ApiResponse(data=task, message="Task created successfully")


# Attachments


@router.get("/{job_id}/attachments", response_model=ApiResponse[list[AttachmentRead]])
async def list_attachments(
    job_id: UUID, principal: StaffPrincipal, service: AttachmentServiceDep
) -> ApiResponse[list[AttachmentRead]]:
    attachments = await service.list_attachments(principal, job_id)
    return ApiResponse(data=attachments)


@router.post(
    "/{job_id}/attachments",
    response_model=ApiResponse[AttachmentRead],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Disallowed file type or file too large"}},
)
async def upload_attachment(
    job_id: UUID,
    principal: StaffPrincipal,
    service: AttachmentServiceDep,
    broadcaster: BroadcasterDep,
    file: Annotated[UploadFile, File()],
) -> ApiResponse[AttachmentRead]:
    """Upload one file as multipart form field ``file``."""
    # Read one byte past the limit so oversized uploads are detectable without buffering them whole
    data = await file.read(get_settings().max_upload_bytes + 1)
    attachment = await service.upload(
        principal,
        job_id,
        file_name=file.filename or "upload",
        mime_type=file.content_type or "application/octet-stream",
        data=data,
    )
    await broadcaster.attachment_created(attachment)
    return ApiResponse(data=attachment, message="File uploaded successfully")


# Signatures


@router.get("/{job_id}/signatures", response_model=ApiResponse[list[SignatureRead]])
async def list_signatures(
    job_id: UUID, principal: StaffPrincipal, service: SignatureServiceDep
) -> ApiResponse[list[SignatureRead]]:
    signatures = await service.list_signatures(principal, job_id)
    return ApiResponse(data=signatures)


@router.post(
    "/{job_id}/signatures",
    response_model=ApiResponse[SignatureRead],
    status_code=status.HTTP_201_CREATED,
)
async def create_signature(
    job_id: UUID,
    data: SignatureCreate,
    principal: StaffPrincipal,
    service: SignatureServiceDep,
    broadcaster: BroadcasterDep,
) -> ApiResponse[SignatureRead]:
    signature = await service.create_signature(principal, job_id, data)
    await broadcaster.signature_created(signature)
    return ApiResponse(data=signature, message="Signature captured successfully")
