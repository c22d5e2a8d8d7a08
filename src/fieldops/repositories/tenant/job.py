"""Repository for Job entity and its joined read model."""

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from sqlalchemy import Select, select
from sqlmodel import col, or_

from src.fieldops.models.public import User
from src.fieldops.models.tenant import Customer, Job, JobStatus
from src.fieldops.repositories.base import LIKE_ESCAPE, TenantScopedRepository, contains_pattern


@dataclass(slots=True)
class JobView:
    """A job with the display names of the rows it references."""

    job: Job
    customer_name: str | None
    worker_name: str | None
    status_name: str | None
    status_color: str | None


@dataclass(slots=True)
class JobFilters:
    """Conjunctive filters for the tenant job list.

    ``archived`` of None hides archived jobs; True or False matches exactly.
    """

    status_id: UUID | None = None
    worker_id: UUID | None = None
    customer_id: UUID | None = None
    search: str | None = None
    archived: bool | None = None


def _view_query() -> Select[Any]:
    return (
        select(
            Job,
            col(Customer.name).label("customer_name"),
            col(User.name).label("worker_name"),
            col(JobStatus.name).label("status_name"),
            col(JobStatus.color).label("status_color"),
        )
        .outerjoin(Customer, col(Customer.id) == col(Job.customer_id))
        .outerjoin(User, col(User.id) == col(Job.assigned_worker_id))
        .outerjoin(JobStatus, col(JobStatus.id) == col(Job.status_id))
        .where(col(Job.is_deleted) == False)  # noqa: E712
    )


def _to_view(row: Any) -> JobView:
    return JobView(
        job=row[0],
        customer_name=row.customer_name,
        worker_name=row.worker_name,
        status_name=row.status_name,
        status_color=row.status_color,
    )


class JobRepository(TenantScopedRepository[Job]):
    model = Job

    async def list_views(self, tenant_id: UUID, filters: JobFilters) -> list[JobView]:
        """Tenant jobs matching every given filter, newest first."""
        query = _view_query().where(col(Job.tenant_id) == tenant_id)

        if filters.archived is None:
            query = query.where(col(Job.is_archived) == False)  # noqa: E712
        else:
            query = query.where(col(Job.is_archived) == filters.archived)
        if filters.status_id is not None:
            query = query.where(col(Job.status_id) == filters.status_id)
        if filters.worker_id is not None:
            query = query.where(col(Job.assigned_worker_id) == filters.worker_id)
        if filters.customer_id is not None:
            query = query.where(col(Job.customer_id) == filters.customer_id)
        if filters.search:
            pattern = contains_pattern(filters.search)
            query = query.where(
                or_(
                    col(Job.title).ilike(pattern, escape=LIKE_ESCAPE),
                    col(Customer.name).ilike(pattern, escape=LIKE_ESCAPE),
                )
            )

        result = await self.session.execute(query.order_by(col(Job.created_at).desc()))
        return [_to_view(row) for row in result.all()]

    async def list_worker_views(self, tenant_id: UUID, worker_id: UUID) -> list[JobView]:
        """Active jobs assigned to a worker, soonest scheduled first."""
        query = (
            _view_query()
            .where(
                col(Job.tenant_id) == tenant_id,
                col(Job.assigned_worker_id) == worker_id,
                col(Job.is_archived) == False,  # noqa: E712
            )
            .order_by(
                col(Job.scheduled_date).asc().nulls_last(),
                col(Job.created_at).desc(),
            )
        )
        result = await self.session.execute(query)
        return [_to_view(row) for row in result.all()]

    async def get_view(self, tenant_id: UUID, job_id: UUID) -> JobView | None:
        """Joined view of one live job, archived or not."""
        result = await self.session.execute(
            _view_query().where(col(Job.id) == job_id, col(Job.tenant_id) == tenant_id)
        )
        row = result.first()
        return _to_view(row) if row is not None else None

    async def get_view_by_token(self, token: str) -> JobView | None:
        """Joined view of the live job holding the capability token, in any tenant."""
        result = await self.session.execute(
            _view_query().where(col(Job.customer_access_token) == token)
        )
        row = result.first()
        return _to_view(row) if row is not None else None
