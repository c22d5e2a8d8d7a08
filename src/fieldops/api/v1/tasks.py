"""Task endpoints addressed by task id."""

from uuid import UUID

from fastapi import APIRouter

from src.fieldops.api.dependencies import (
    AdminPrincipal,
    BroadcasterDep,
    StaffPrincipal,
    TaskServiceDep,
)
from src.fieldops.schemas.common import ApiResponse, DeletedRead
from src.fieldops.schemas.task import TaskComplete, TaskRead, TaskUpdate

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.patch(
    "/{task_id}",
    response_model=ApiResponse[TaskRead],
    responses={404: {"description": "Task not found"}},
)
async def update_task(
    task_id: UUID,
    data: TaskUpdate,
    principal: AdminPrincipal,
    service: TaskServiceDep,
    broadcaster: BroadcasterDep,
) -> ApiResponse[TaskRead]:
    task = await service.update_task(principal, task_id, data)
    await broadcaster.task_updated(task)
    return ApiResponse(data=task, message="Task updated successfully")


@router.post(
    "/{task_id}/complete",
    response_model=ApiResponse[TaskRead],
    responses={403: {"description": "Not assigned to this job"}, 404: {"description": "Task not found"}},
)
async def complete_task(
    task_id: UUID,
    principal: StaffPrincipal,
    service: TaskServiceDep,
    broadcaster: BroadcasterDep,
    data: TaskComplete | None = None,
) -> ApiResponse[TaskRead]:
    """Mark a task done, or reopen it with ``{"complete": false}``."""
    complete = data.complete if data is not None else True
    task = await service.complete_task(principal, task_id, complete)
    await broadcaster.task_updated(task)
    return ApiResponse(data=task)


@router.delete(
    "/{task_id}",
    response_model=ApiResponse[DeletedRead],
    responses={404: {"description": "Task not found"}},
)
async def delete_task(
    task_id: UUID,
    principal: AdminPrincipal,
    service: TaskServiceDep,
    broadcaster: BroadcasterDep,
) -> ApiResponse[DeletedRead]:
    task = await service.delete_task(principal, task_id)
    await broadcaster.task_deleted(task.job_id, task.id)
    return ApiResponse(data=DeletedRead(id=task.id), message="Task deleted successfully")
