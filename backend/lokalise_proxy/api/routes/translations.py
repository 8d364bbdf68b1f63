"""Translation Routes — completed translations by locale, and translation updates.

Invariants:
    - fetch answers {locale: {key_name: text}} for exactly the requested locales
    - /api/translations/fetch resolves the project from body, query or the
      LOKALISE_PROJECT_ID fallback; the path form takes precedence when used
    - Update failures always surface (write path)
"""

import logging

from fastapi import APIRouter, Depends

from lokalise_proxy.api.dependencies import (
    get_lokalise_client, get_project_id, get_translation_aggregator,
)
from lokalise_proxy.api.responses import success_response
from lokalise_proxy.core.domain_types import ProjectId
from lokalise_proxy.core.translation_map import count_translations
from lokalise_proxy.infrastructure.lokalise_client import LokaliseClient
from lokalise_proxy.schemas.translations import (
    FetchTranslationsRequest, UpdateTranslationsRequest,
)
from lokalise_proxy.services.translation_aggregator import TranslationAggregator

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/translations", tags=["translations"])


async def _fetch(
    project_id: ProjectId,
    body: FetchTranslationsRequest,
    aggregator: TranslationAggregator,
) -> dict:
    result = await aggregator.aggregate(project_id, body.target_locales)
    counts = count_translations(result)
    logger.info(f"Fetched translations: {counts}", extra={"project_id": project_id})
    return success_response(
        result, counts=counts, targetLocales=list(result),
    )


@router.post("/fetch")
async def fetch_translations(
    body: FetchTranslationsRequest,
    project_id: ProjectId = Depends(get_project_id),
    aggregator: TranslationAggregator = Depends(get_translation_aggregator),
):
    return await _fetch(project_id, body, aggregator)


@router.post("/{project_id}/fetch")
async def fetch_project_translations(
    body: FetchTranslationsRequest,
    project_id: ProjectId = Depends(get_project_id),
    aggregator: TranslationAggregator = Depends(get_translation_aggregator),
):
    return await _fetch(project_id, body, aggregator)


@router.post("/{project_id}/update")
async def update_translations(
    body: UpdateTranslationsRequest,
    project_id: ProjectId = Depends(get_project_id),
    client: LokaliseClient = Depends(get_lokalise_client),
):
    translations = body.upstream_translations()
    logger.info(
        f"Updating {len(translations)} translations",
        extra={"project_id": project_id},
    )
    result = await client.update_translations(project_id, translations)
    return success_response(result, updated=len(result.get("translations") or []))
