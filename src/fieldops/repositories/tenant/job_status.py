"""Repository for JobStatus entity."""

from uuid import UUID

from sqlalchemy import func, update
from sqlmodel import col, select

from src.fieldops.models.base import utc_now
from src.fieldops.models.tenant import Job, JobStatus
from src.fieldops.repositories.base import TenantScopedRepository


class JobStatusRepository(TenantScopedRepository[JobStatus]):
    model = JobStatus

    async def list_for_tenant(self, tenant_id: UUID) -> list[JobStatus]:
        """Live statuses in display order."""
        result = await self.session.execute(
            select(JobStatus)
            .where(
                JobStatus.tenant_id == tenant_id,
                JobStatus.is_deleted == False,  # noqa: E712
            )
            .order_by(col(JobStatus.order_index), col(JobStatus.created_at))
        )
        return list(result.scalars().all())

    async def next_order_index(self, tenant_id: UUID) -> int:
        """One past the highest live index, 0 for an empty registry."""
        result = await self.session.execute(
            select(func.coalesce(func.max(JobStatus.order_index), -1)).where(
                JobStatus.tenant_id == tenant_id,
                JobStatus.is_deleted == False,  # noqa: E712
            )
        )
        return int(result.scalar_one()) + 1

    async def is_in_use(self, tenant_id: UUID, status_id: UUID) -> bool:
        """Whether any live job of the tenant references the status."""
        result = await self.session.execute(
            select(Job.id)
            .where(
                Job.tenant_id == tenant_id,
                Job.status_id == status_id,
                Job.is_deleted == False,  # noqa: E712
            )
            .limit(1)
        )
        return result.first() is not None

    async def set_order_index(self, tenant_id: UUID, status_id: UUID, order_index: int) -> None:
        """Write one position. Ids outside the tenant match no row."""
        await self.session.execute(
            update(JobStatus)
            .where(
                col(JobStatus.id) == status_id,
                col(JobStatus.tenant_id) == tenant_id,
                col(JobStatus.is_deleted) == False,  # noqa: E712
            )
            .values(order_index=order_index, updated_at=utc_now())
        )
