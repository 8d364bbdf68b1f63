"""Translation Aggregator — all keys of a project reshaped into locale -> key -> text.

Invariants:
    - Empty locale set fails fast with ValidationError, before any upstream call
    - Result holds exactly one mapping per requested locale (empty when unmatched)
    - A project without keys is a valid state: empty mappings, no error
    - Keys are fetched with embedded translations via cursor pagination until
      Lokalise stops returning a next cursor, bounded by page_limit
    - Upstream failure handling follows FetchFailurePolicy:
      DEGRADE logs and returns empty mappings, RAISE propagates UpstreamError

Design Decisions:
    - Failure policy is explicit configuration rather than an implicit code path,
      so deployments that must not mask outages can opt into RAISE
    - Reshaping lives in core/translation_map.py; this module only does I/O + policy
"""

import logging
from collections.abc import Iterable

from lokalise_proxy.config import Settings
from lokalise_proxy.core.domain_types import FetchFailurePolicy, LocaleTranslationMap
from lokalise_proxy.core.errors import UpstreamError, ValidationError
from lokalise_proxy.core.translation_map import (
    build_translation_map, empty_translation_map, normalize_locales,
)
from lokalise_proxy.infrastructure.lokalise_client import LokaliseClient

logger = logging.getLogger(__name__)


class TranslationAggregator:
    """Fetches keys with translations and groups them by requested locale."""

    def __init__(
        self,
        client: LokaliseClient,
        *,
        page_size: int = 500,
        page_limit: int = 100,
        failure_policy: FetchFailurePolicy = FetchFailurePolicy.DEGRADE,
    ):
        self.client = client
        self.page_size = page_size
        self.page_limit = page_limit
        self.failure_policy = failure_policy

    @classmethod
    def from_settings(cls, client: LokaliseClient, settings: Settings) -> "TranslationAggregator":
        return cls(
            client,
            page_size=settings.key_page_size,
            page_limit=settings.key_page_limit,
            failure_policy=settings.translation_fetch_policy,
        )

    async def aggregate(
        self, project_id: str, requested_locales: Iterable[str],
    ) -> LocaleTranslationMap:
        locales = normalize_locales(requested_locales)
        if not locales:
            raise ValidationError(
                "Target locales are required and must contain at least one locale",
                field="targetLocales",
            )

        try:
            keys = await self.fetch_all_keys(project_id)
        except UpstreamError as e:
            if self.failure_policy is FetchFailurePolicy.RAISE:
                raise
            logger.warning(
                f"Translation fetch failed, returning empty translations: {e.message}",
                extra={
                    "project_id": project_id,
                    "upstream_status": e.status_code,
                    "locale_count": len(locales),
                },
            )
            return empty_translation_map(locales)

        if not keys:
            logger.warning(
                "No keys found in project",
                extra={"project_id": project_id},
            )
            return empty_translation_map(locales)

        result = build_translation_map(keys, locales)
        logger.info(
            "Aggregated translations",
            extra={
                "project_id": project_id,
                "key_count": len(keys),
                "locale_count": len(locales),
            },
        )
        return result

    async def fetch_all_keys(self, project_id: str) -> list[dict]:
        """Follow the key cursor until the last page (or page_limit)."""
        keys: list[dict] = []
        cursor: str | None = None

        for _ in range(self.page_limit):
            body, cursor = await self.client.list_keys_page(
                project_id, limit=self.page_size, cursor=cursor,
            )
            page_keys = body.get("keys") if isinstance(body, dict) else None
            if isinstance(page_keys, list):
                keys.extend(key for key in page_keys if isinstance(key, dict))
            if not cursor:
                return keys

        logger.warning(
            f"Stopped after {self.page_limit} key pages; remaining keys were not fetched",
            extra={"project_id": project_id, "page": self.page_limit, "key_count": len(keys)},
        )
        return keys
