"""API test fixtures — the FastAPI app wired to FakeLokalise over ASGI."""

import httpx
import pytest

from lokalise_proxy.api.dependencies import get_upstream_transport
from lokalise_proxy.api.rate_limits import build_limiter
from lokalise_proxy.config import get_settings
from lokalise_proxy.main import app

TOKEN = "tok-plugin"


@pytest.fixture
def api_app(fake_lokalise, settings):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_upstream_transport] = lambda: fake_lokalise.transport
    production_limiter = app.state.limiter
    # Fresh in-memory counters per test
    app.state.limiter = build_limiter(settings)
    yield app
    app.dependency_overrides.clear()
    app.state.limiter = production_limiter
    app.state.debug = False


@pytest.fixture
async def client(api_app):
    """Client authenticated the way the plugin does it (Bearer header)."""
    transport = httpx.ASGITransport(app=api_app, raise_app_exceptions=False)
    async with httpx.AsyncClient(
        transport=transport,
        base_url="http://proxy.test",
        headers={"Authorization": f"Bearer {TOKEN}"},
    ) as ac:
        yield ac


@pytest.fixture
async def anonymous_client(api_app):
    transport = httpx.ASGITransport(app=api_app, raise_app_exceptions=False)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://proxy.test",
    ) as ac:
        yield ac
