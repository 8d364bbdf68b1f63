"""Error Handlers — global exception handlers rendering the uniform error envelope.

Invariants:
    - ProxyError → {success: false, error: {code, message, timestamp, ...}} with its status
    - RequestValidationError → 400 with field-level details
    - Starlette HTTPException (unknown route, wrong method) → same envelope, same status
    - Exception (catch-all) → 500; exception text only when app.state.debug is set

Design Decisions:
    - Four-layer handler: domain (ProxyError), validation (Pydantic), routing
      (HTTPException), catch-all (Exception)
    - Debug flag read from app.state at request time so tests can flip it per app
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from lokalise_proxy.api.responses import utc_timestamp
from lokalise_proxy.core.errors import ProxyError

logger = logging.getLogger(__name__)

AVAILABLE_ENDPOINTS = [
    "/health",
    "/api/projects",
    "/api/keys",
    "/api/translations",
    "/api/files",
    "/api/tasks",
]


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_proxy_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_proxy_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ProxyError)
    async def proxy_error_handler(request: Request, exc: ProxyError):
        """Handle all proxy domain/upstream errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        error: dict = {"timestamp": utc_timestamp()}
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            error["code"] = "NOT_FOUND"
            error["message"] = f"Route {request.method} {request.url.path} not found"
            error["availableEndpoints"] = AVAILABLE_ENDPOINTS
        else:
            error["code"] = "HTTP_ERROR"
            error["message"] = str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": error},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — internal details only in debug mode."""
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            exc_info=True,
        )
        debug = getattr(request.app.state, "debug", False)
        error = {
            "code": "INTERNAL_ERROR",
            "message": str(exc) if debug else "Internal server error",
            "timestamp": utc_timestamp(),
        }
        if debug:
            error["type"] = type(exc).__name__
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": error},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "success": False,
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "timestamp": utc_timestamp(),
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
