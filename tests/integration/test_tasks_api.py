"""Task checklist operations through the HTTP API."""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.fieldops.realtime import RoomHub, job_room
from tests.helpers import FakeConnection, TenantWorld, auth_headers, create_job, create_task

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


class TestTaskCompletion:
    async def test_completion_fields_move_together(
        self, client: AsyncClient, db_session: AsyncSession, world: TenantWorld
    ) -> None:
        """Completed, timestamp and completer are set and cleared as one."""
        job = await create_job(db_session, world)
        task = await create_task(db_session, job)
        headers = auth_headers(world.worker)
        url = f"/api/v1/tasks/{task.id}/complete"

        for complete in (True, False, True, True, False):
            response = await client.post(url, json={"complete": complete}, headers=headers)
            assert response.status_code == 200
            data = response.json()["data"]
            assert data["is_completed"] is complete
            if complete:
                assert data["completed_at"] is not None
                assert data["completed_by"] == str(world.worker.id)
            else:
                assert data["completed_at"] is None
                assert data["completed_by"] is None

    async def test_empty_body_completes(
        self, client: AsyncClient, db_session: AsyncSession, world: TenantWorld
    ) -> None:
        job = await create_job(db_session, world)
        task = await create_task(db_session, job)

        response = await client.post(
            f"/api/v1/tasks/{task.id}/complete", headers=auth_headers(world.admin)
        )
        assert response.status_code == 200
        assert response.json()["data"]["completed_by"] == str(world.admin.id)

    async def test_unassigned_worker_cannot_complete(
        self, client: AsyncClient, db_session: AsyncSession, world: TenantWorld
    ) -> None:
        job = await create_job(db_session, world)
        task = await create_task(db_session, job)

        response = await client.post(
            f"/api/v1/tasks/{task.id}/complete",
            json={"complete": True},
            headers=auth_headers(world.other_worker),
        )
        assert response.status_code == 403

    async def test_completion_is_broadcast_to_job_room(
        self, client: AsyncClient, db_session: AsyncSession, world: TenantWorld, hub: RoomHub
    ) -> None:
        job = await create_job(db_session, world)
        task = await create_task(db_session, job)
        watcher = FakeConnection()
        await hub.join(job_room(job.id), watcher)

        await client.post(
            f"/api/v1/tasks/{task.id}/complete",
            json={"complete": True},
            headers=auth_headers(world.worker),
        )
        assert watcher.events() == ["task:updated"]
        assert watcher.messages[0]["data"]["is_completed"] is True


class TestTaskAdministration:
    async def test_create_and_list(
        self, client: AsyncClient, db_session: AsyncSession, world: TenantWorld, hub: RoomHub
    ) -> None:
        job = await create_job(db_session, world)
        watcher = FakeConnection()
        await hub.join(job_room(job.id), watcher)

        created = await client.post(
            f"/api/v1/jobs/{job.id}/tasks",
            json={"title": "  Check wiring  ", "description": ""},
            headers=auth_headers(world.admin),
        )
        assert created.status_code == 201
        data = created.json()["data"]
        assert data["title"] == "Check wiring"
        assert data["description"] is None
        assert data["is_completed"] is False
        assert watcher.events() == ["task:created"]

        listed = await client.get(f"/api/v1/jobs/{job.id}/tasks", headers=auth_headers(world.worker))
        assert [t["id"] for t in listed.json()["data"]] == [data["id"]]

    async def test_worker_cannot_create(
        self, client: AsyncClient, db_session: AsyncSession, world: TenantWorld
    ) -> None:
        job = await create_job(db_session, world)

        response = await client.post(
            f"/api/v1/jobs/{job.id}/tasks", json={"title": "x"}, headers=auth_headers(world.worker)
        )
        assert response.status_code == 403

    async def test_update_does_not_touch_completion(
        self, client: AsyncClient, db_session: AsyncSession, world: TenantWorld
    ) -> None:
        job = await create_job(db_session, world)
        task = await create_task(db_session, job, title="Old")
        headers = auth_headers(world.admin)

        rejected = await client.patch(
            f"/api/v1/tasks/{task.id}", json={"isCompleted": True}, headers=headers
        )
        assert rejected.status_code == 400

        response = await client.patch(
            f"/api/v1/tasks/{task.id}", json={"title": "New"}, headers=headers
        )
        assert response.status_code == 200
        assert response.json()["data"]["title"] == "New"
        assert response.json()["data"]["is_completed"] is False

    async def test_delete(
        self, client: AsyncClient, db_session: AsyncSession, world: TenantWorld, hub: RoomHub
    ) -> None:
        job = await create_job(db_session, world)
        task = await create_task(db_session, job)
        watcher = FakeConnection()
        await hub.join(job_room(job.id), watcher)
        headers = auth_headers(world.admin)

        response = await client.delete(f"/api/v1/tasks/{task.id}", headers=headers)
        assert response.status_code == 200
        assert watcher.messages == [{"event": "task:deleted", "data": {"id": str(task.id)}}]

        listed = await client.get(f"/api/v1/jobs/{job.id}/tasks", headers=headers)
        assert listed.json()["data"] == []
