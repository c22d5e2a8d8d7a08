"""Optional Redis connection shared by the realtime relay and health checks.

When REDIS_URL is unset or the server cannot be reached, callers receive None
and fall back to process-local behaviour.
"""

from redis.asyncio import ConnectionPool, Redis

from src.fieldops.core.config import get_settings
from src.fieldops.core.logging import get_logger

logger = get_logger(__name__)

_pool: ConnectionPool | None = None
_redis: Redis | None = None
_connection_attempted: bool = False


async def get_redis() -> Redis | None:
    """Return the shared client, connecting lazily on first use."""
    global _pool, _redis, _connection_attempted

    if _redis is not None:
        return _redis

    # A failed attempt is not retried until close_redis() resets the state
    if _connection_attempted:
        return None

    _connection_attempted = True
    settings = get_settings()

    if not settings.redis_url:
        logger.info("Redis not configured, realtime events stay in-process")
        return None

    try:
        _pool = ConnectionPool.from_url(
            settings.redis_url,
            max_connections=settings.redis_pool_size,
            decode_responses=True,
        )
        _redis = Redis(connection_pool=_pool)
        await _redis.ping()  # type: ignore[misc]
        logger.info("Redis connected")
        return _redis

    except Exception as e:
        logger.warning("Redis connection failed, continuing without it", error=str(e))
        if _redis:
            await _redis.aclose()
            _redis = None
        if _pool:
            await _pool.disconnect()
            _pool = None
        return None


async def close_redis() -> None:
    """Close the connection pool. Called from the application lifespan."""
    global _pool, _redis, _connection_attempted

    if _redis:
        await _redis.aclose()
        logger.info("Redis connection closed")
    if _pool:
        await _pool.disconnect()

    _redis = None
    _pool = None
    _connection_attempted = False


def set_redis(client: Redis | None) -> None:
    """Install a client directly, e.g. a fakeredis instance in tests."""
    global _pool, _redis, _connection_attempted
    _pool = None
    _redis = client
    _connection_attempted = client is not None
