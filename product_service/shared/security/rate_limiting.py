"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client default limit on every API route.
Each application instance gets its own limiter and in-memory counters.

The limit is checked from an application-wide dependency rather than
``SlowAPIMiddleware``: the dependency runs after routing, so the matched
endpoint is known however the routers are nested.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from product_service.core.config import Settings


def build_limiter(settings: Settings) -> Limiter:
    """Create a limiter keyed by client address.

    Args:
        settings: Supplies the default limit and the on/off switch.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def enforce_rate_limit(request: Request) -> None:
    """Count the request against the app limiter's default limits.

    Raises:
        RateLimitExceeded: When the client is over its limit.
    """
    limiter: Limiter = request.app.state.limiter
    if not limiter.enabled or getattr(request.state, "_rate_limiting_complete", False):
        return
    # Same entry point slowapi's own route decorator uses.
    limiter._check_request_limit(request, request.scope.get("endpoint"), False)
    request.state._rate_limiting_complete = True


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=429,
        content={
            "error": "rate_limit_exceeded",
            "message": f"Rate limit exceeded: {exc.detail}",
        },
    )
