"""Per-request log context and the access log line."""

import time

from asgi_correlation_id import correlation_id
from fastapi import Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from src.fieldops.core.logging import bind_request_context, clear_request_context, get_logger

logger = get_logger("fieldops.access")

# Health and metrics scrapes are not access-logged
QUIET_PATHS = frozenset({"/health", "/metrics"})


async def logging_context_middleware(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """Bind the request id for the duration of the request, then log its outcome.

    The user context bound by the auth dependency is still in place when the
    access line is written, so it carries user_id, tenant_id and role.
    """
    clear_request_context()
    bind_request_context(correlation_id.get())
    started = time.perf_counter()
    try:
        response = await call_next(request)
        if request.url.path not in QUIET_PATHS:
            logger.info(
                "Request handled",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 1),
            )
        return response
    finally:
        clear_request_context()
