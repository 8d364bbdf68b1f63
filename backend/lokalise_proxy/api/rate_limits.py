"""Rate Limiting — per-IP request budget applied to every route via slowapi.

Invariants:
    - One fixed window per client address: RATE_LIMIT_MAX_REQUESTS requests per
      RATE_LIMIT_WINDOW_SECONDS (default 100 per 15 minutes)
    - Exceeding it answers 429 in the uniform {success: false, error} envelope
    - RATE_LIMIT_ENABLED=false turns the middleware into a pass-through

Design Decisions:
    - One application-wide limit + SlowAPIMiddleware instead of per-route
      decorators: all routes draw from the same per-IP counter, since the
      budget protects the shared Lokalise quota
    - The limiter lives on app.state; SlowAPIMiddleware reads it per request,
      which lets tests install a limiter with a small budget
    - In-memory storage: counters are per process, which matches a single
      proxy instance in front of the plugin
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from lokalise_proxy.config import Settings
from lokalise_proxy.core.errors import RateLimitError

logger = logging.getLogger(__name__)


def rate_limit_expression(settings: Settings) -> str:
    """e.g. "100 per 900 seconds" (limits string notation)."""
    return (
        f"{settings.rate_limit_max_requests} per "
        f"{settings.rate_limit_window_seconds} seconds"
    )


def build_limiter(settings: Settings) -> Limiter:
    return Limiter(
        key_func=get_remote_address,
        application_limits=[rate_limit_expression(settings)],
        enabled=settings.rate_limit_enabled,
    )


def rate_limit_handler(request: Request, exc: Exception) -> JSONResponse:
    """429 in the proxy's error envelope.

    Synchronous: SlowAPIMiddleware calls the registered handler
    without awaiting it.
    """
    error = RateLimitError(limit=str(getattr(exc, "detail", "")))
    logger.warning(
        f"Rate limit exceeded ({error.limit})",
        extra={
            "client_ip": get_remote_address(request),
            "path": request.url.path,
            "error_code": error.code,
        },
    )
    return JSONResponse(status_code=error.http_status, content=error.to_response())


def setup_rate_limiter(app: FastAPI, settings: Settings) -> None:
    app.state.limiter = build_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)
    app.add_middleware(SlowAPIMiddleware)
