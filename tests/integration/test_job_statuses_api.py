"""Job status registry endpoints."""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tests.helpers import TenantWorld, auth_headers, create_job

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


class TestStatusCreation:
    async def test_appends_after_last_with_default_color(
        self, client: AsyncClient, world: TenantWorld
    ) -> None:
        response = await client.post(
            "/api/v1/job-statuses", json={"name": "Done"}, headers=auth_headers(world.admin)
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["order_index"] == world.status.order_index + 1
        assert data["color"] == "#6366f1"

    @pytest.mark.parametrize("color", ["red", "#12345", "#GGGGGG", "6366f1"])
    async def test_color_must_be_hex(
        self, client: AsyncClient, world: TenantWorld, color: str
    ) -> None:
        response = await client.post(
            "/api/v1/job-statuses",
            json={"name": "Odd", "color": color},
            headers=auth_headers(world.admin),
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "color"

    async def test_workers_may_only_read(self, client: AsyncClient, world: TenantWorld) -> None:
        headers = auth_headers(world.worker)

        listed = await client.get("/api/v1/job-statuses", headers=headers)
        assert listed.status_code == 200

        created = await client.post("/api/v1/job-statuses", json={"name": "X"}, headers=headers)
        assert created.status_code == 403


class TestStatusReorder:
    async def test_indices_follow_list_position(
        self, client: AsyncClient, world: TenantWorld
    ) -> None:
        headers = auth_headers(world.admin)
        second = await client.post(
            "/api/v1/job-statuses", json={"name": "Second"}, headers=headers
        )
        second_id = second.json()["data"]["id"]

        response = await client.post(
            "/api/v1/job-statuses/reorder",
            json={"status_ids": [second_id, str(world.status.id)]},
            headers=headers,
        )

        assert response.status_code == 200
        assert [(s["name"], s["order_index"]) for s in response.json()["data"]] == [
            ("Second", 0),
            ("New", 1),
        ]

    async def test_empty_list_is_rejected(self, client: AsyncClient, world: TenantWorld) -> None:
        response = await client.post(
            "/api/v1/job-statuses/reorder",
            json={"statusIds": []},
            headers=auth_headers(world.admin),
        )
        assert response.status_code == 400


class TestStatusDeletion:
    async def test_in_use_status_cannot_be_deleted(
        self, client: AsyncClient, db_session: AsyncSession, world: TenantWorld
    ) -> None:
        await create_job(db_session, world)

        response = await client.delete(
            f"/api/v1/job-statuses/{world.status.id}", headers=auth_headers(world.admin)
        )

        assert response.status_code == 409
        assert response.json()["error"] == "Cannot delete status that is in use"

    async def test_status_used_only_by_deleted_jobs_can_be_deleted(
        self, client: AsyncClient, db_session: AsyncSession, world: TenantWorld
    ) -> None:
        await create_job(db_session, world, is_deleted=True)
        headers = auth_headers(world.admin)

        response = await client.delete(f"/api/v1/job-statuses/{world.status.id}", headers=headers)
        assert response.status_code == 200

        listed = await client.get("/api/v1/job-statuses", headers=headers)
        assert listed.json()["data"] == []

    async def test_rename_keeps_position(self, client: AsyncClient, world: TenantWorld) -> None:
        response = await client.patch(
            f"/api/v1/job-statuses/{world.status.id}",
            json={"name": "Fresh", "color": "#000000"},
            headers=auth_headers(world.admin),
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert (data["name"], data["color"], data["order_index"]) == ("Fresh", "#000000", 0)
