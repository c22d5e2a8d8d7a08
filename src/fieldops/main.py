from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.fieldops.api.middlewares import setup_middlewares
from src.fieldops.api.v1.router import api_router
from src.fieldops.core.config import get_settings
from src.fieldops.core.db import dispose_engine
from src.fieldops.core.exceptions import setup_exception_handlers
from src.fieldops.core.health import setup_health_endpoint, setup_metrics
from src.fieldops.core.logging import get_logger, setup_logging
from src.fieldops.core.rate_limit import limiter
from src.fieldops.core.redis import close_redis, get_redis
from src.fieldops.realtime import RedisRelay, broadcaster

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}")

    # With Redis, events reach connections held by every process
    relay: RedisRelay | None = None
    redis = await get_redis()
    if redis is not None:
        relay = RedisRelay(broadcaster.hub, redis, settings.realtime_channel)
        await relay.start()
        broadcaster.relay = relay
    else:
        logger.info("Realtime relay disabled, delivering to local connections only")

    yield

    logger.info("Closing connections...")
    if relay is not None:
        broadcaster.relay = None
        await relay.stop()
    await close_redis()
    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "auth", "description": "Login, credential refresh and logout"},
    {"name": "users", "description": "Tenant user administration"},
    {"name": "customers", "description": "Customer records"},
    {"name": "job-statuses", "description": "Per-tenant ordered job status registry"},
    {"name": "jobs", "description": "Jobs and their tasks, attachments and signatures"},
    {"name": "tasks", "description": "Task checklist items"},
    {"name": "attachments", "description": "File attachments"},
    {"name": "signatures", "description": "Captured signatures"},
    {"name": "realtime", "description": "Websocket room subscriptions"},
]


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Multi-tenant field service API with live job updates",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
        lifespan=lifespan,
    )

    setup_exception_handlers(app)

    app.state.limiter = limiter

    setup_middlewares(app, settings)

    app.include_router(api_router)

    setup_metrics(app)
    setup_health_endpoint(app)

    return app


app = create_app()
