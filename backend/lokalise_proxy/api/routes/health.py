"""Health & Service Index — liveness probe and endpoint listing.

Invariants:
    - GET /health always returns 200 if the process is up; it never calls Lokalise
"""

import time

from fastapi import APIRouter, Depends, status

from lokalise_proxy import __version__
from lokalise_proxy.api.responses import utc_timestamp
from lokalise_proxy.config import Settings, get_settings

router = APIRouter(tags=["health"])

_STARTED_AT = time.monotonic()


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check(settings: Settings = Depends(get_settings)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "timestamp": utc_timestamp(),
        "uptime": round(time.monotonic() - _STARTED_AT, 3),
        "environment": settings.environment,
        "version": __version__,
    }


@router.get("/")
async def service_index():
    return {
        "name": "Lokalise Backend API",
        "version": __version__,
        "description": "Backend API server for Builder.io Lokalise integration",
        "endpoints": {
            "health": "/health",
            "projects": "/api/projects",
            "keys": "/api/keys",
            "translations": "/api/translations",
            "files": "/api/files",
            "tasks": "/api/tasks",
        },
        "integration": {
            "frontend": "Builder.io plugin",
            "authentication": "Bearer token (Lokalise API key)",
            "responseFormat": "{ success: boolean, data: any, timestamp: string }",
        },
    }
