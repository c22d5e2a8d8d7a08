"""Every read and write is confined to the caller's tenant.

Records of another tenant must behave exactly like records that do not
exist: 404, never 403, and nothing is modified.
"""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.fieldops.models import Job
from tests.factories import UserFactory
from tests.helpers import TenantWorld, auth_headers, create_job, create_task

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


@pytest.fixture
async def foreign_job(db_session: AsyncSession, other_world: TenantWorld) -> Job:
    return await create_job(db_session, other_world, title="Foreign")


class TestCrossTenantReads:
    async def test_job_detail(
        self, client: AsyncClient, world: TenantWorld, foreign_job: Job
    ) -> None:
        response = await client.get(
            f"/api/v1/jobs/{foreign_job.id}", headers=auth_headers(world.admin)
        )
        assert response.status_code == 404

    async def test_job_list_excludes_other_tenants(
        self, client: AsyncClient, db_session: AsyncSession, world: TenantWorld, foreign_job: Job
    ) -> None:
        own = await create_job(db_session, world)

        response = await client.get("/api/v1/jobs", headers=auth_headers(world.admin))
        assert [j["id"] for j in response.json()["data"]] == [str(own.id)]

    async def test_child_collections(
        self, client: AsyncClient, world: TenantWorld, foreign_job: Job
    ) -> None:
        headers = auth_headers(world.admin)
        for collection in ("tasks", "attachments", "signatures"):
            response = await client.get(
                f"/api/v1/jobs/{foreign_job.id}/{collection}", headers=headers
            )
            assert response.status_code == 404, collection

    async def test_customers_and_statuses(
        self, client: AsyncClient, world: TenantWorld, other_world: TenantWorld
    ) -> None:
        headers = auth_headers(world.admin)

        customer = await client.get(
            f"/api/v1/customers/{other_world.customer.id}", headers=headers
        )
        assert customer.status_code == 404

        status = await client.get(f"/api/v1/job-statuses/{other_world.status.id}", headers=headers)
        assert status.status_code == 404

        statuses = await client.get("/api/v1/job-statuses", headers=headers)
        assert [s["id"] for s in statuses.json()["data"]] == [str(world.status.id)]

    async def test_users(
        self, client: AsyncClient, world: TenantWorld, other_world: TenantWorld
    ) -> None:
        response = await client.get(
            f"/api/v1/users/{other_world.admin.id}", headers=auth_headers(world.admin)
        )
        assert response.status_code == 404


class TestCrossTenantWrites:
    async def test_job_update_and_delete(
        self,
        client: AsyncClient,
        world: TenantWorld,
        other_world: TenantWorld,
        foreign_job: Job,
    ) -> None:
        headers = auth_headers(world.admin)

        update = await client.patch(
            f"/api/v1/jobs/{foreign_job.id}", json={"title": "Hijacked"}, headers=headers
        )
        assert update.status_code == 404

        delete = await client.delete(f"/api/v1/jobs/{foreign_job.id}", headers=headers)
        assert delete.status_code == 404

        owner_view = await client.get(
            f"/api/v1/jobs/{foreign_job.id}", headers=auth_headers(other_world.admin)
        )
        assert owner_view.status_code == 200
        assert owner_view.json()["data"]["title"] == "Foreign"

    async def test_task_writes(
        self,
        client: AsyncClient,
        db_session: AsyncSession,
        world: TenantWorld,
        foreign_job: Job,
    ) -> None:
        task = await create_task(db_session, foreign_job)
        headers = auth_headers(world.admin)

        create = await client.post(
            f"/api/v1/jobs/{foreign_job.id}/tasks", json={"title": "x"}, headers=headers
        )
        assert create.status_code == 404

        complete = await client.post(
            f"/api/v1/tasks/{task.id}/complete", json={"complete": True}, headers=headers
        )
        assert complete.status_code == 404

        delete = await client.delete(f"/api/v1/tasks/{task.id}", headers=headers)
        assert delete.status_code == 404

    async def test_status_and_customer_writes(
        self, client: AsyncClient, world: TenantWorld, other_world: TenantWorld
    ) -> None:
        headers = auth_headers(world.admin)

        status = await client.patch(
            f"/api/v1/job-statuses/{other_world.status.id}", json={"name": "X"}, headers=headers
        )
        assert status.status_code == 404

        customer = await client.delete(
            f"/api/v1/customers/{other_world.customer.id}", headers=headers
        )
        assert customer.status_code == 404

    async def test_reorder_skips_foreign_ids(
        self, client: AsyncClient, world: TenantWorld, other_world: TenantWorld
    ) -> None:
        response = await client.post(
            "/api/v1/job-statuses/reorder",
            json={"statusIds": [str(other_world.status.id), str(world.status.id)]},
            headers=auth_headers(world.admin),
        )
        assert response.status_code == 200
        assert [(s["id"], s["order_index"]) for s in response.json()["data"]] == [
            (str(world.status.id), 1)
        ]

        untouched = await client.get(
            "/api/v1/job-statuses", headers=auth_headers(other_world.admin)
        )
        assert untouched.json()["data"][0]["order_index"] == 0


class TestRoleGates:
    async def test_missing_credential(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/jobs/worker/assigned")
        assert response.status_code == 401
        assert response.json()["success"] is False

    async def test_malformed_credential(self, client: AsyncClient) -> None:
        response = await client.get(
            "/api/v1/jobs/worker/assigned", headers={"Authorization": "Bearer not-a-jwt"}
        )
        assert response.status_code == 401

    async def test_customer_role_has_no_api_access(
        self, client: AsyncClient, db_session: AsyncSession, world: TenantWorld
    ) -> None:
        customer_user = UserFactory.customer(tenant_id=world.tenant.id)
        db_session.add(customer_user)
        await db_session.commit()

        response = await client.get(
            "/api/v1/jobs/worker/assigned", headers=auth_headers(customer_user)
        )
        assert response.status_code == 403
