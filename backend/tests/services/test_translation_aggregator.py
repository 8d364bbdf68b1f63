"""Translation aggregator tests — fetch, reshape, pagination and failure policy.

Tests cover:
    - Empty locale set fails fast before any upstream call
    - Scenario: fr/de requested, key translated only into fr
    - Zero keys → empty mapping per locale, no error
    - Upstream 500 → empty mapping per locale under DEGRADE, raised under RAISE
    - Cursor pagination follows next cursors and stops at page_limit
"""

import pytest

from lokalise_proxy.config import Settings
from lokalise_proxy.core.domain_types import FetchFailurePolicy
from lokalise_proxy.core.errors import UpstreamError, ValidationError
from lokalise_proxy.services.translation_aggregator import TranslationAggregator

CURSOR = "X-Pagination-Next-Cursor"


def _key(key_id, name, **texts):
    return {
        "key_id": key_id,
        "key_name": name,
        "translations": [
            {"language_iso": locale, "translation": text} for locale, text in texts.items()
        ],
    }


async def test_empty_locale_set_fails_fast(fake_lokalise, aggregator):
    with pytest.raises(ValidationError):
        await aggregator.aggregate("p1", [])
    with pytest.raises(ValidationError):
        await aggregator.aggregate("p1", [" ", ""])
    assert fake_lokalise.requests == []


async def test_scenario_fr_only_translation(fake_lokalise, aggregator):
    fake_lokalise.add("GET", "projects/p1/keys", json={
        "keys": [_key(1, {"web": "homepage.title"}, fr="Bienvenue", en="Welcome")],
    })

    result = await aggregator.aggregate("p1", ["fr", "de"])

    assert result == {"fr": {"homepage.title": "Bienvenue"}, "de": {}}


async def test_requests_embedded_translations(fake_lokalise, aggregator):
    fake_lokalise.add("GET", "projects/p1/keys", json={"keys": []})

    await aggregator.aggregate("p1", ["fr"])

    params = fake_lokalise.requests[0].url.params
    assert params["include_translations"] == "1"
    assert params["pagination"] == "cursor"


async def test_zero_keys_returns_empty_mapping_per_locale(fake_lokalise, aggregator):
    fake_lokalise.add("GET", "projects/p1/keys", json={"project_id": "p1", "keys": []})

    assert await aggregator.aggregate("p1", ["fr", "de"]) == {"fr": {}, "de": {}}


async def test_missing_keys_field_treated_as_empty(fake_lokalise, aggregator):
    fake_lokalise.add("GET", "projects/p1/keys", json={"project_id": "p1"})

    assert await aggregator.aggregate("p1", ["fr"]) == {"fr": {}}


async def test_upstream_500_degrades_to_empty_mappings(fake_lokalise, aggregator):
    fake_lokalise.add("GET", "projects/p1/keys", status=500, json={"message": "boom"})

    assert await aggregator.aggregate("p1", ["fr", "de"]) == {"fr": {}, "de": {}}


async def test_upstream_failure_mid_pagination_degrades(fake_lokalise, aggregator):
    fake_lokalise.add("GET", "projects/p1/keys", json={"keys": [_key(1, "a", fr="A")]}, headers={CURSOR: "c2"})
    fake_lokalise.add("GET", "projects/p1/keys", status=502, json={})

    assert await aggregator.aggregate("p1", ["fr"]) == {"fr": {}}


async def test_raise_policy_propagates_upstream_error(fake_lokalise, strict_aggregator):
    fake_lokalise.add("GET", "projects/p1/keys", status=500, json={"message": "boom"})

    with pytest.raises(UpstreamError) as exc_info:
        await strict_aggregator.aggregate("p1", ["fr"])
    assert exc_info.value.status_code == 500


async def test_follows_cursor_across_pages(fake_lokalise, aggregator):
    fake_lokalise.add("GET", "projects/p1/keys", json={"keys": [_key(1, "a", fr="A1")]}, headers={CURSOR: "c2"})
    fake_lokalise.add("GET", "projects/p1/keys", json={"keys": [_key(2, "b", fr="B")]}, headers={CURSOR: "c3"})
    fake_lokalise.add("GET", "projects/p1/keys", json={"keys": [_key(3, "a", fr="A3")]})

    result = await aggregator.aggregate("p1", ["fr"])

    assert result == {"fr": {"a": "A3", "b": "B"}}
    cursors = [r.url.params.get("cursor") for r in fake_lokalise.requests]
    assert cursors == [None, "c2", "c3"]


async def test_stops_at_page_limit(fake_lokalise, lokalise_client):
    fake_lokalise.add("GET", "projects/p1/keys", json={"keys": [_key(1, "a", fr="A")]}, headers={CURSOR: "again"})
    aggregator = TranslationAggregator(lokalise_client, page_limit=3)

    result = await aggregator.aggregate("p1", ["fr"])

    assert result == {"fr": {"a": "A"}}
    assert len(fake_lokalise.requests) == 3


async def test_from_settings_uses_configured_policy(lokalise_client):
    settings = Settings(
        _env_file=None,
        translation_fetch_policy=FetchFailurePolicy.RAISE,
        key_page_size=100,
        key_page_limit=7,
    )
    aggregator = TranslationAggregator.from_settings(lokalise_client, settings)
    assert aggregator.failure_policy is FetchFailurePolicy.RAISE
    assert aggregator.page_size == 100
    assert aggregator.page_limit == 7
