"""Task checklist operations on a job."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.fieldops.core.exceptions import NotFound
from src.fieldops.core.logging import get_logger
from src.fieldops.core.security import Principal
from src.fieldops.models.base import utc_now
from src.fieldops.models.tenant import Job, Task
from src.fieldops.repositories import JobRepository, TaskRepository
from src.fieldops.schemas.task import TaskCreate, TaskRead, TaskUpdate
from src.fieldops.services.access_policy import (
    Action,
    Resource,
    authorize,
    authorize_update_fields,
)
from src.fieldops.services.job_service import load_live_job

logger = get_logger(__name__)


class TaskService:
    def __init__(self, task_repo: TaskRepository, job_repo: JobRepository, session: AsyncSession):
        self.task_repo = task_repo
        self.job_repo = job_repo
        self.session = session

    async def list_tasks(self, principal: Principal, job_id: UUID) -> list[TaskRead]:
        """Tasks of a job in creation order."""
        job = await load_live_job(self.job_repo, principal, job_id)
        authorize(principal, Resource.TASK, Action.VIEW, job=job)

        tasks = await self.task_repo.list_for_job(principal.tenant_id, job_id)
        return [TaskRead.model_validate(t) for t in tasks]

    async def create_task(self, principal: Principal, job_id: UUID, data: TaskCreate) -> TaskRead:
        job = await load_live_job(self.job_repo, principal, job_id)
        authorize(principal, Resource.TASK, Action.CREATE, job=job)

        task = Task(job_id=job.id, title=data.title, description=data.description)
        self.task_repo.add(task)
        await self._commit()
        await self.session.refresh(task)

        logger.info("Task created", task_id=str(task.id), job_id=str(job_id))
        return TaskRead.model_validate(task)

    async def update_task(self, principal: Principal, task_id: UUID, data: TaskUpdate) -> TaskRead:
        """Change title and/or description. Completion is never touched here."""
        task, job = await self._load(principal, task_id)
        authorize(principal, Resource.TASK, Action.UPDATE, job=job)

        changes = data.changes()
        authorize_update_fields(principal, Resource.TASK, set(changes))
        for field, value in changes.items():
            setattr(task, field, value)

        self.task_repo.touch(task)
        await self._commit()
        await self.session.refresh(task)
        return TaskRead.model_validate(task)

    async def complete_task(self, principal: Principal, task_id: UUID, complete: bool) -> TaskRead:
        """Mark a task done or reopen it.

        The only writer of ``completed_at`` and ``completed_by``: both are set
        together when completing and cleared together when reopening.
        """
        task, job = await self._load(principal, task_id)
        authorize(principal, Resource.TASK, Action.COMPLETE, job=job)

        task.is_completed = complete
        task.completed_at = utc_now() if complete else None
        task.completed_by = principal.user_id if complete else None

        self.task_repo.touch(task)
        await self._commit()
        await self.session.refresh(task)

        logger.info(
            "Task completed" if complete else "Task reopened",
            task_id=str(task_id),
            job_id=str(job.id),
        )
        return TaskRead.model_validate(task)

    async def delete_task(self, principal: Principal, task_id: UUID) -> Task:
        task, job = await self._load(principal, task_id)
        authorize(principal, Resource.TASK, Action.DELETE, job=job)

        self.task_repo.soft_delete(task)
        await self._commit()

        logger.info("Task deleted", task_id=str(task_id), job_id=str(job.id))
        return task

    async def _load(self, principal: Principal, task_id: UUID) -> tuple[Task, Job]:
        found = await self.task_repo.get_with_job(principal.tenant_id, task_id)
        if found is None:
            raise NotFound("Task not found")
        return found

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
