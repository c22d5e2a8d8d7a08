"""User management endpoints."""

import pytest
from httpx import AsyncClient

from tests.factories import DEFAULT_TEST_PASSWORD
from tests.helpers import TenantWorld, auth_headers

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


class TestUserCreation:
    async def test_created_user_can_log_in(
        self, client: AsyncClient, world: TenantWorld
    ) -> None:
        response = await client.post(
            "/api/v1/users",
            json={
                "email": "New.Hire@Example.com",
                "password": "secret-pass",
                "name": "  New Hire ",
                "role": "worker",
            },
            headers=auth_headers(world.admin),
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["email"] == "new.hire@example.com"
        assert data["name"] == "New Hire"
        assert data["tenant_id"] == str(world.tenant.id)

        login = await client.post(
            "/api/v1/auth/login",
            json={"email": "new.hire@example.com", "password": "secret-pass"},
        )
        assert login.status_code == 200

    async def test_duplicate_email_conflicts_across_tenants(
        self, client: AsyncClient, world: TenantWorld, other_world: TenantWorld
    ) -> None:
        response = await client.post(
            "/api/v1/users",
            json={
                "email": other_world.worker.email,
                "password": "secret-pass",
                "name": "Copy",
                "role": "worker",
            },
            headers=auth_headers(world.admin),
        )

        assert response.status_code == 409
        assert response.json()["error"] == "Email already registered"

    async def test_short_password_is_rejected(
        self, client: AsyncClient, world: TenantWorld
    ) -> None:
        response = await client.post(
            "/api/v1/users",
            json={"email": "x@example.com", "password": "123", "name": "X", "role": "worker"},
            headers=auth_headers(world.admin),
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "password"


class TestUserListing:
    async def test_workers_are_sorted_by_name(
        self, client: AsyncClient, world: TenantWorld
    ) -> None:
        response = await client.get("/api/v1/users/workers", headers=auth_headers(world.admin))

        assert response.status_code == 200
        assert [u["name"] for u in response.json()["data"]] == ["Alice Worker", "Bob Worker"]

    async def test_list_covers_whole_tenant(
        self, client: AsyncClient, world: TenantWorld
    ) -> None:
        response = await client.get("/api/v1/users", headers=auth_headers(world.admin))

        ids = {u["id"] for u in response.json()["data"]}
        assert ids == {str(world.admin.id), str(world.worker.id), str(world.other_worker.id)}

    async def test_workers_cannot_manage_users(
        self, client: AsyncClient, world: TenantWorld
    ) -> None:
        response = await client.get("/api/v1/users", headers=auth_headers(world.worker))

        assert response.status_code == 403
        assert response.json()["error"] == "Admin role required for this operation"


class TestUserUpdates:
    async def test_admin_cannot_change_own_role(
        self, client: AsyncClient, world: TenantWorld
    ) -> None:
        response = await client.patch(
            f"/api/v1/users/{world.admin.id}",
            json={"role": "worker"},
            headers=auth_headers(world.admin),
        )

        assert response.status_code == 403
        assert response.json()["error"] == "Cannot change your own role"

    async def test_password_change_takes_effect(
        self, client: AsyncClient, world: TenantWorld
    ) -> None:
        response = await client.patch(
            f"/api/v1/users/{world.worker.id}",
            json={"password": "brand-new-pass"},
            headers=auth_headers(world.admin),
        )
        assert response.status_code == 200

        old = await client.post(
            "/api/v1/auth/login",
            json={"email": world.worker.email, "password": DEFAULT_TEST_PASSWORD},
        )
        new = await client.post(
            "/api/v1/auth/login",
            json={"email": world.worker.email, "password": "brand-new-pass"},
        )
        assert old.status_code == 401
        assert new.status_code == 200

    async def test_email_collision(self, client: AsyncClient, world: TenantWorld) -> None:
        response = await client.patch(
            f"/api/v1/users/{world.worker.id}",
            json={"email": world.other_worker.email},
            headers=auth_headers(world.admin),
        )
        assert response.status_code == 409


class TestUserDeletion:
    async def test_admin_cannot_delete_self(
        self, client: AsyncClient, world: TenantWorld
    ) -> None:
        response = await client.delete(
            f"/api/v1/users/{world.admin.id}", headers=auth_headers(world.admin)
        )

        assert response.status_code == 403
        assert response.json()["error"] == "Cannot delete your own account"

    async def test_deleted_user_disappears(
        self, client: AsyncClient, world: TenantWorld
    ) -> None:
        headers = auth_headers(world.admin)

        response = await client.delete(f"/api/v1/users/{world.other_worker.id}", headers=headers)
        assert response.status_code == 200
        assert response.json()["data"] == {"id": str(world.other_worker.id)}

        gone = await client.get(f"/api/v1/users/{world.other_worker.id}", headers=headers)
        assert gone.status_code == 404

        login = await client.post(
            "/api/v1/auth/login",
            json={"email": world.other_worker.email, "password": DEFAULT_TEST_PASSWORD},
        )
        assert login.status_code == 401
