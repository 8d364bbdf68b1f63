"""Lokalise Proxy API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ProxyError → uniform {success, error} envelope
    - CORS configured from settings (ALLOWED_ORIGINS), credentials allowed so the
      plugin can send its Authorization header
    - No shared mutable state between requests; Lokalise clients are per request

Design Decisions:
    - Lifespan over @app.on_event: logging configured once at startup
    - Per-IP rate limit innermost (api/rate_limits.py) so CORS headers still
      reach the plugin on a 429
    - Body-size limits are left to the hosting edge
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from lokalise_proxy import __version__
from lokalise_proxy.api.error_handlers import register_error_handlers
from lokalise_proxy.api.rate_limits import setup_rate_limiter
from lokalise_proxy.api.routes import files, health, keys, projects, tasks, translations
from lokalise_proxy.config import get_settings
from lokalise_proxy.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"Lokalise proxy started ({settings.environment}), "
        f"upstream {settings.lokalise_base_url}",
    )
    if settings.lokalise_api_token:
        logger.warning(
            "LOKALISE_API_TOKEN fallback is set; requests without a token will use it. "
            "Do not enable this on shared deployments.",
        )
    yield
    logger.info("Lokalise proxy shutting down")


app = FastAPI(
    title="Lokalise Proxy API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.state.debug = settings.debug

setup_rate_limiter(app, settings)

# CORS — configured from settings, not hardcoded
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=1024)

register_error_handlers(app)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(projects.router)
app.include_router(keys.router)
app.include_router(translations.router)
app.include_router(files.router)
app.include_router(tasks.router)
