"""Root conftest — shared test configuration and fixtures.

Invariants:
    - No test ever reaches api.lokalise.com: the upstream is a FakeLokalise
    - Development fallbacks (LOKALISE_API_TOKEN / LOKALISE_PROJECT_ID) are unset
      unless a test sets them on its own Settings instance
"""

import os

import pytest

# Ensure tests don't accidentally use a real token or project
for _name in ("LOKALISE_API_TOKEN", "LOKALISE_PROJECT_ID", "TRANSLATION_FETCH_POLICY"):
    os.environ.pop(_name, None)

from lokalise_proxy.config import Settings  # noqa: E402
from lokalise_proxy.infrastructure.lokalise_client import LokaliseClient  # noqa: E402
from tests.fake_lokalise import FakeLokalise  # noqa: E402


@pytest.fixture
def fake_lokalise():
    return FakeLokalise()


@pytest.fixture
def settings():
    """Settings isolated from .env files."""
    return Settings(_env_file=None)


@pytest.fixture
async def lokalise_client(fake_lokalise):
    async with LokaliseClient(
        "tok-test", transport=fake_lokalise.transport,
    ) as client:
        yield client
