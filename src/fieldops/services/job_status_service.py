"""Job status registry - the tenant's ordered workflow labels."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.fieldops.core.exceptions import Conflict, NotFound
from src.fieldops.core.logging import get_logger
from src.fieldops.core.security import Principal
from src.fieldops.models.tenant import JobStatus
from src.fieldops.repositories import JobStatusRepository
from src.fieldops.schemas.job_status import JobStatusCreate, JobStatusUpdate

logger = get_logger(__name__)


class JobStatusService:
    """Owns JobStatus rows. Jobs reference them but never modify them.

    Two operations are check-then-act without row locks:

    - ``delete_status`` checks for referencing jobs, then deletes. A job
      created between the two statements can end up referencing a deleted
      status.
    - ``reorder_statuses`` writes one statement per id inside a single
      commit; concurrent reorders interleave and the last commit wins.
    """

    def __init__(
        self,
        status_repo: JobStatusRepository,
        session: AsyncSession,
        default_color: str,
    ):
        self.status_repo = status_repo
        self.session = session
        self.default_color = default_color

    async def list_statuses(self, principal: Principal) -> list[JobStatus]:
        return await self.status_repo.list_for_tenant(principal.tenant_id)

    async def get_status(self, principal: Principal, status_id: UUID) -> JobStatus:
        job_status = await self.status_repo.get_in_tenant(principal.tenant_id, status_id)
        if job_status is None:
            raise NotFound("Job status not found")
        return job_status

    async def create_status(self, principal: Principal, data: JobStatusCreate) -> JobStatus:
        """Append a status after the current last one."""
        job_status = JobStatus(
            tenant_id=principal.tenant_id,
            name=data.name,
            color=data.color or self.default_color,
            order_index=await self.status_repo.next_order_index(principal.tenant_id),
        )
        self.status_repo.add(job_status)
        await self._commit()
        await self.session.refresh(job_status)

        logger.info(
            "Job status created",
            status_id=str(job_status.id),
            order_index=job_status.order_index,
        )
        return job_status

    async def update_status(
        self, principal: Principal, status_id: UUID, data: JobStatusUpdate
    ) -> JobStatus:
        """Rename or recolour. ``order_index`` only changes through reorder."""
        job_status = await self.get_status(principal, status_id)
        for field, value in data.changes().items():
            setattr(job_status, field, value)

        self.status_repo.touch(job_status)
        await self._commit()
        await self.session.refresh(job_status)
        return job_status

    async def delete_status(self, principal: Principal, status_id: UUID) -> None:
        """Soft-delete a status no live job references.

        Raises:
            NotFound: No such status in the caller's tenant.
            Conflict: At least one live job still uses it.
        """
        job_status = await self.get_status(principal, status_id)
        if await self.status_repo.is_in_use(principal.tenant_id, status_id):
            raise Conflict("Cannot delete status that is in use")

        self.status_repo.soft_delete(job_status)
        await self._commit()

        logger.info("Job status deleted", status_id=str(status_id))

    async def reorder_statuses(self, principal: Principal, status_ids: list[UUID]) -> list[JobStatus]:
        """Set each status's index to its position in ``status_ids``.

        Ids that are unknown or belong to another tenant match no row and are
        skipped. Returns the tenant's statuses in their new order.
        """
        for index, status_id in enumerate(status_ids):
            await self.status_repo.set_order_index(principal.tenant_id, status_id, index)
        await self._commit()

        logger.info("Job statuses reordered", count=len(status_ids))
        return await self.list_statuses(principal)

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
