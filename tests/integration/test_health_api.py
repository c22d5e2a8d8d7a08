"""Health endpoint tests."""

from collections.abc import Iterator
from uuid import uuid4

import pytest
from httpx import AsyncClient
from redis.asyncio import Redis

from src.fieldops.core import health

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


@pytest.fixture(autouse=True)
def reset_health_cache() -> Iterator[None]:
    health.reset_health_cache()
    yield
    health.reset_health_cache()


class TestHealth:
    async def test_healthy_without_redis(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "healthy"
        assert body["redis"] == "not_configured"
        assert body["cached"] is False

    async def test_redis_is_checked_when_present(
        self, client: AsyncClient, mock_redis: Redis
    ) -> None:
        response = await client.get("/health")

        assert response.json()["redis"] == "healthy"

    async def test_result_is_cached(self, client: AsyncClient) -> None:
        first = await client.get("/health")
        second = await client.get("/health")

        assert first.json()["cached"] is False
        assert second.json()["cached"] is True
        assert second.json()["timestamp"] == first.json()["timestamp"]

    async def test_unreachable_database_is_unhealthy(
        self, client: AsyncClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def broken() -> str:
            return "unhealthy: connection refused"

        monkeypatch.setattr(health, "_check_database", broken)

        response = await client.get("/health")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"

    async def test_request_id_header_is_returned(self, client: AsyncClient) -> None:
        request_id = uuid4().hex
        response = await client.get("/health", headers={"X-Request-ID": request_id})

        assert response.headers["X-Request-ID"] == request_id
