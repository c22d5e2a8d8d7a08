"""Test helper functions for common data creation patterns."""

from dataclasses import dataclass
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.fieldops.core.security import Principal, create_access_token
from src.fieldops.models import Customer, Job, JobStatus, Task, Tenant, User, UserRole
from src.fieldops.realtime import admits_event
from tests.factories import (
    CustomerFactory,
    JobFactory,
    JobStatusFactory,
    TaskFactory,
    TenantFactory,
    UserFactory,
)


class FakeConnection:
    """Stands in for a websocket: records every JSON message sent to it.

    Without a principal it admits every event.
    """

    def __init__(self, fail: bool = False, principal: Principal | None = None) -> None:
        self.messages: list[dict[str, Any]] = []
        self.fail = fail
        self.principal = principal

    def admits(self, event: str, data: Any) -> bool:
        return self.principal is None or admits_event(self.principal, event, data)

    async def send_json(self, data: Any) -> None:
        if self.fail:
            raise RuntimeError("connection closed")
        self.messages.append(data)

    def events(self) -> list[str]:
        return [m["event"] for m in self.messages]


def auth_headers(user: User) -> dict[str, str]:
    """Bearer header carrying a fresh access credential for ``user``."""
    token = create_access_token(user.id, user.tenant_id, user.role, user.email)
    return {"Authorization": f"Bearer {token}"}


def principal_for(user: User) -> Principal:
    return Principal(
        user_id=user.id,
        tenant_id=user.tenant_id,
        role=UserRole(user.role),
        email=user.email,
    )


@dataclass
class TenantWorld:
    """One tenant with an admin, two workers, a customer and a status."""

    tenant: Tenant
    admin: User
    worker: User
    other_worker: User
    customer: Customer
    status: JobStatus


async def create_tenant_world(session: AsyncSession) -> TenantWorld:
    """Create and commit a fully populated tenant."""
    tenant = TenantFactory.build()
    session.add(tenant)
    await session.flush()

    admin = UserFactory.admin(tenant_id=tenant.id)
    worker = UserFactory.worker(tenant_id=tenant.id, name="Alice Worker")
    other_worker = UserFactory.worker(tenant_id=tenant.id, name="Bob Worker")
    customer = CustomerFactory.build(tenant_id=tenant.id, name="Acme")
    status = JobStatusFactory.build(tenant_id=tenant.id, name="New", order_index=0)
    session.add_all([admin, worker, other_worker, customer, status])
    await session.commit()

    return TenantWorld(tenant, admin, worker, other_worker, customer, status)


async def create_job(session: AsyncSession, world: TenantWorld, **kwargs: Any) -> Job:
    """Create and commit a job in ``world``, by default assigned to its worker."""
    kwargs.setdefault("assigned_worker_id", world.worker.id)
    job = JobFactory.build(
        tenant_id=world.tenant.id,
        customer_id=world.customer.id,
        status_id=world.status.id,
        **kwargs,
    )
    session.add(job)
    await session.commit()
    return job


async def create_task(session: AsyncSession, job: Job, **kwargs: Any) -> Task:
    task = TaskFactory.build(job_id=job.id, **kwargs)
    session.add(task)
    await session.commit()
    return task
