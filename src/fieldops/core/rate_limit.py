"""Per-IP rate limiting for credential endpoints.

Uses Redis storage when REDIS_URL is configured so limits hold across
processes; otherwise limits are tracked in memory per process.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from src.fieldops.core.config import get_settings
from src.fieldops.core.logging import get_logger

logger = get_logger(__name__)


def get_rate_limit_key(request: Request) -> str:
    """Key on client IP only.

    Request headers and bodies are attacker-controlled and must not be part
    of the key, otherwise rotating them yields unlimited fresh buckets.
    """
    return get_remote_address(request) or "unknown"


def create_limiter() -> Limiter:
    """Create the limiter, disabled in the testing environment."""
    settings = get_settings()

    if settings.app_env == "testing":
        return Limiter(key_func=get_rate_limit_key, enabled=False)

    if settings.redis_url:
        logger.info("Rate limiter using Redis backend")
        return Limiter(key_func=get_rate_limit_key, storage_uri=settings.redis_url)

    logger.info("Rate limiter using in-memory backend")
    return Limiter(key_func=get_rate_limit_key)


limiter = create_limiter()
