"""Health and metrics endpoints."""

import secrets
import time
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy import text

from src.fieldops.core.config import get_settings
from src.fieldops.core.db import get_session
from src.fieldops.core.redis import get_redis

_health_cache: dict[str, Any] | None = None
_health_cache_time: float = 0
HEALTH_CACHE_TTL = 10  # seconds


def reset_health_cache() -> None:
    """Reset health cache (for testing)."""
    global _health_cache, _health_cache_time
    _health_cache = None
    _health_cache_time = 0


async def _check_database() -> str:
    try:
        async with get_session() as session:
            await session.execute(text("SELECT 1"))
        return "healthy"
    except Exception as e:
        return f"unhealthy: {e!s}"


async def _check_redis() -> str:
    redis = await get_redis()
    if redis is None:
        return "not_configured"
    try:
        await redis.ping()  # type: ignore[misc]
        return "healthy"
    except Exception as e:
        return f"unhealthy: {e!s}"


def setup_health_endpoint(app: FastAPI) -> None:
    """Register GET /health.

    The database is required. Redis is optional: when it is configured but
    unreachable the service reports "degraded" because realtime events stop
    crossing process boundaries.
    """

    @app.get("/health", tags=["health"])
    async def health() -> JSONResponse:
        global _health_cache, _health_cache_time

        now = time.time()
        if _health_cache and (now - _health_cache_time) < HEALTH_CACHE_TTL:
            cached = {**_health_cache, "cached": True}
            return JSONResponse(
                content=cached,
                status_code=200 if cached["status"] != "unhealthy" else 503,
            )

        database = await _check_database()
        redis = await _check_redis()

        overall = "healthy"
        if database != "healthy":
            overall = "unhealthy"
        elif redis.startswith("unhealthy"):
            overall = "degraded"

        result: dict[str, Any] = {
            "status": overall,
            "database": database,
            "redis": redis,
            "cached": False,
            "timestamp": now,
        }
        _health_cache = result
        _health_cache_time = now

        return JSONResponse(
            content=result,
            status_code=200 if overall != "unhealthy" else 503,
        )


def setup_metrics(app: FastAPI) -> None:
    """Expose Prometheus metrics, key-protected when METRICS_API_KEY is set."""
    settings = get_settings()
    instrumentator = Instrumentator().instrument(app)

    if not settings.metrics_api_key:
        instrumentator.expose(app, endpoint="/metrics")
        return

    api_key_header = APIKeyHeader(name="X-Metrics-Key", auto_error=False)

    async def verify_metrics_key(api_key: str | None = Depends(api_key_header)) -> None:
        expected = settings.metrics_api_key
        if api_key is None or expected is None or not secrets.compare_digest(api_key, expected):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or missing metrics API key",
            )

    instrumentator.expose(app, endpoint="/metrics", dependencies=[Depends(verify_metrics_key)])
