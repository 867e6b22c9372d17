"""
Request logging middleware.

Logs method, path, status code and duration of every request.
Query strings and bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("product_service.request")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that emits one log line per handled request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response
