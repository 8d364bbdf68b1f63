"""Key Routes — list keys, keys grouped as translations, and key creation.

Invariants:
    - with-translations requires ?locales=a,b (trimmed, empties dropped); it
      answers with one mapping per requested locale
    - Key creation failures always surface (write path)
"""

import logging

from fastapi import APIRouter, Depends, Query

from lokalise_proxy.api.dependencies import (
    get_lokalise_client, get_project_id, get_translation_aggregator,
)
from lokalise_proxy.api.responses import success_response
from lokalise_proxy.core.domain_types import ProjectId
from lokalise_proxy.core.errors import ValidationError
from lokalise_proxy.core.translation_map import count_translations, parse_locale_list
from lokalise_proxy.infrastructure.lokalise_client import LokaliseClient
from lokalise_proxy.schemas.keys import CreateKeysRequest
from lokalise_proxy.services.translation_aggregator import TranslationAggregator

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/keys", tags=["keys"])


@router.get("/{project_id}")
async def list_keys(
    project_id: ProjectId = Depends(get_project_id),
    client: LokaliseClient = Depends(get_lokalise_client),
):
    return success_response(await client.list_keys(project_id))


@router.get("/{project_id}/with-translations")
async def list_keys_with_translations(
    locales: str | None = Query(None, description="Comma-separated locale codes, e.g. en,fr,de"),
    project_id: ProjectId = Depends(get_project_id),
    aggregator: TranslationAggregator = Depends(get_translation_aggregator),
):
    target_locales = parse_locale_list(locales)
    if not target_locales:
        raise ValidationError(
            "Target locales are required. Provide as comma-separated query "
            "parameter: ?locales=en,fr,de",
            field="locales",
        )
    result = await aggregator.aggregate(project_id, target_locales)
    return success_response(
        result, targetLocales=target_locales, counts=count_translations(result),
    )


@router.post("/{project_id}")
async def create_keys(
    body: CreateKeysRequest,
    project_id: ProjectId = Depends(get_project_id),
    client: LokaliseClient = Depends(get_lokalise_client),
):
    keys = body.upstream_keys()
    logger.info(f"Creating {len(keys)} keys", extra={"project_id": project_id})
    result = await client.create_keys(project_id, keys)
    created = len(result.get("keys") or [])
    logger.info(f"Created {created} keys", extra={"project_id": project_id})
    return success_response(result, created=created)
