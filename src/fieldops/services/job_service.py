"""Job aggregate store - tenant-scoped job lifecycle.

Every mutation follows the same shape: load the job with the tenant predicate
(absent, deleted and foreign jobs are all NotFound), run the access policy
against that fresh state, write, commit, and read back the joined view the
caller returns and broadcasts.
"""

from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.fieldops.core.exceptions import NotFound, ValidationFailed
from src.fieldops.core.logging import get_logger
from src.fieldops.core.security import Principal
from src.fieldops.models.tenant import Job
from src.fieldops.repositories import (
    CustomerRepository,
    JobFilters,
    JobRepository,
    JobStatusRepository,
    TaskRepository,
    UserRepository,
)
from src.fieldops.schemas.job import JobCreate, JobDetail, JobRead, JobUpdate
from src.fieldops.schemas.task import TaskRead
from src.fieldops.services.access_policy import (
    Action,
    Resource,
    authorize,
    authorize_update_fields,
)

logger = get_logger(__name__)


async def load_live_job(job_repo: JobRepository, principal: Principal, job_id: UUID) -> Job:
    """Load a live job of the caller's tenant for a policy decision."""
    job = await job_repo.get_in_tenant(principal.tenant_id, job_id)
    if job is None:
        raise NotFound("Job not found")
    return job


class JobService:
    def __init__(
        self,
        job_repo: JobRepository,
        customer_repo: CustomerRepository,
        status_repo: JobStatusRepository,
        user_repo: UserRepository,
        task_repo: TaskRepository,
        session: AsyncSession,
    ):
        self.job_repo = job_repo
        self.customer_repo = customer_repo
        self.status_repo = status_repo
        self.user_repo = user_repo
        self.task_repo = task_repo
        self.session = session

    async def list_jobs(self, principal: Principal, filters: JobFilters) -> list[JobRead]:
        """Tenant-wide job list. Without a specific job only TENANT scope passes."""
        authorize(principal, Resource.JOB, Action.VIEW)
        views = await self.job_repo.list_views(principal.tenant_id, filters)
        return [JobRead.from_view(v) for v in views]

    async def list_assigned_jobs(self, principal: Principal) -> list[JobRead]:
        """Active jobs assigned to the caller, soonest scheduled first."""
        views = await self.job_repo.list_worker_views(principal.tenant_id, principal.user_id)
        return [JobRead.from_view(v) for v in views]

    async def get_job(self, principal: Principal, job_id: UUID) -> JobDetail:
        """Joined job with its task list."""
        view = await self.job_repo.get_view(principal.tenant_id, job_id)
        if view is None:
            raise NotFound("Job not found")
        authorize(principal, Resource.JOB, Action.VIEW, job=view.job)

        tasks = await self.task_repo.list_for_job(principal.tenant_id, job_id)
        return JobDetail.from_view(view, tasks=[TaskRead.model_validate(t) for t in tasks])

    async def load_job(self, principal: Principal, job_id: UUID) -> Job:
        return await load_live_job(self.job_repo, principal, job_id)

    async def create_job(self, principal: Principal, data: JobCreate) -> JobRead:
        authorize(principal, Resource.JOB, Action.CREATE)
        await self._validate_references(principal.tenant_id, data.model_dump())

        job = Job(
            tenant_id=principal.tenant_id,
            customer_id=data.customer_id,
            status_id=data.status_id,
            assigned_worker_id=data.assigned_worker_id,
            title=data.title,
            description=data.description,
            scheduled_date=data.scheduled_date,
        )
        self.job_repo.add(job)
        await self._commit()

        logger.info("Job created", job_id=str(job.id))
        return await self._read(principal, job.id)

    async def update_job(
        self, principal: Principal, job_id: UUID, payload: dict[str, Any]
    ) -> JobRead:
        """Apply the fields present in a raw update payload.

        The payload keys are checked against the role's allow-list before the
        payload is validated, so a worker sending anything besides the status
        is refused even when the extra key would not validate.

        Raises:
            NotFound: No live job with this id in the caller's tenant.
            Forbidden: The caller may not update this job, or the payload
                carries a key outside the role's allow-list. Nothing is
                applied in either case.
            ValidationFailed: The payload does not validate, or a referenced
                customer, status or worker is not a live row of the caller's
                tenant.
        """
        job = await self.load_job(principal, job_id)
        authorize(principal, Resource.JOB, Action.UPDATE, job=job)
        authorize_update_fields(
            principal,
            Resource.JOB,
            JobUpdate.payload_fields(payload),
            known=JobUpdate.model_fields.keys(),
        )

        changes = JobUpdate.from_payload(payload).changes()
        await self._validate_references(principal.tenant_id, changes)

        for field, value in changes.items():
            setattr(job, field, value)
        self.job_repo.touch(job)
        await self._commit()

        logger.info("Job updated", job_id=str(job_id), fields=sorted(changes))
        return await self._read(principal, job_id)

    async def set_archived(self, principal: Principal, job_id: UUID, archived: bool) -> JobRead:
        job = await self.load_job(principal, job_id)
        authorize(principal, Resource.JOB, Action.ARCHIVE, job=job)

        job.is_archived = archived
        self.job_repo.touch(job)
        await self._commit()

        logger.info("Job archived" if archived else "Job unarchived", job_id=str(job_id))
        return await self._read(principal, job_id)

    async def delete_job(self, principal: Principal, job_id: UUID) -> Job:
        """Soft-delete. Children stay untouched but become unreachable."""
        job = await self.load_job(principal, job_id)
        authorize(principal, Resource.JOB, Action.DELETE, job=job)

        self.job_repo.soft_delete(job)
        await self._commit()

        logger.info("Job deleted", job_id=str(job_id))
        return job

    async def _read(self, principal: Principal, job_id: UUID) -> JobRead:
        view = await self.job_repo.get_view(principal.tenant_id, job_id)
        if view is None:
            raise NotFound("Job not found")
        return JobRead.from_view(view)

    async def _validate_references(self, tenant_id: UUID, values: dict[str, Any]) -> None:
        """Referenced rows must be live and belong to the same tenant."""
        errors: list[dict[str, str]] = []

        customer_id = values.get("customer_id")
        if customer_id is not None:
            if await self.customer_repo.get_in_tenant(tenant_id, customer_id) is None:
                errors.append({"field": "customer_id", "message": "Customer not found"})

        status_id = values.get("status_id")
        if status_id is not None:
            if await self.status_repo.get_in_tenant(tenant_id, status_id) is None:
                errors.append({"field": "status_id", "message": "Job status not found"})

        worker_id = values.get("assigned_worker_id")
        if worker_id is not None:
            if await self.user_repo.get_worker(tenant_id, worker_id) is None:
                errors.append({"field": "assigned_worker_id", "message": "Worker not found"})

        if errors:
            raise ValidationFailed(errors=errors)

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
