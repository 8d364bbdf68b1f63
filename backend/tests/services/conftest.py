"""Service test fixtures — aggregator wired to the fake Lokalise client."""

import pytest

from lokalise_proxy.core.domain_types import FetchFailurePolicy
from lokalise_proxy.services.translation_aggregator import TranslationAggregator


@pytest.fixture
def aggregator(lokalise_client):
    return TranslationAggregator(lokalise_client, page_size=500, page_limit=5)


@pytest.fixture
def strict_aggregator(lokalise_client):
    return TranslationAggregator(
        lokalise_client, page_size=500, failure_policy=FetchFailurePolicy.RAISE,
    )
