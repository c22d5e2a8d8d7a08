"""Anonymous customer view of a single job through its access token."""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tests.helpers import TenantWorld, auth_headers, create_job, create_task

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


class TestCustomerAccess:
    async def test_token_opens_read_only_view(
        self, client: AsyncClient, db_session: AsyncSession, world: TenantWorld
    ) -> None:
        job = await create_job(db_session, world, title="Boiler service")
        await create_task(db_session, job, title="Inspect burner")

        response = await client.get(f"/api/v1/jobs/customer/{job.customer_access_token}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == str(job.id)
        assert data["title"] == "Boiler service"
        assert data["customer_name"] == "Acme"
        assert data["worker_name"] == "Alice Worker"
        assert data["status_name"] == "New"
        assert [t["title"] for t in data["tasks"]] == ["Inspect burner"]
        assert "customer_access_token" not in data

    async def test_unknown_token(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/jobs/customer/not-a-real-token")

        assert response.status_code == 404
        assert response.json()["error"] == "Job not found"

    async def test_deleting_the_job_revokes_access(
        self, client: AsyncClient, db_session: AsyncSession, world: TenantWorld
    ) -> None:
        job = await create_job(db_session, world)

        deleted = await client.delete(f"/api/v1/jobs/{job.id}", headers=auth_headers(world.admin))
        assert deleted.status_code == 200

        response = await client.get(f"/api/v1/jobs/customer/{job.customer_access_token}")
        assert response.status_code == 404

    async def test_archived_job_stays_visible(
        self, client: AsyncClient, db_session: AsyncSession, world: TenantWorld
    ) -> None:
        job = await create_job(db_session, world, is_archived=True)

        response = await client.get(f"/api/v1/jobs/customer/{job.customer_access_token}")

        assert response.status_code == 200
        assert response.json()["data"]["is_archived"] is True
