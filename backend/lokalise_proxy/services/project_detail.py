"""Project Detail — project metadata and languages fetched concurrently, merged flat.

Invariants:
    - Both lookups are issued concurrently and joined before merging
    - Either lookup failing fails the whole assembly (no partial merge)
    - On failure the other lookup is cancelled and awaited before returning, so
      no request outlives the per-request LokaliseClient
    - Response shape: {"project": {...metadata fields, "languages": [...]}}
"""

import asyncio
import logging
from collections.abc import Awaitable
from typing import Any

from lokalise_proxy.core.project_detail import merge_project_detail
from lokalise_proxy.infrastructure.lokalise_client import LokaliseClient

logger = logging.getLogger(__name__)


async def join_or_cancel(*lookups: Awaitable[Any]) -> list[Any]:
    """Results in argument order; the first failure cancels the rest and is raised."""
    tasks = [asyncio.ensure_future(lookup) for lookup in lookups]
    try:
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        failures = [task.exception() for task in done if task.exception() is not None]
        if failures:
            raise failures[0]
        return [task.result() for task in tasks]
    finally:
        pending = [task for task in tasks if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)


async def get_project_detail(client: LokaliseClient, project_id: str) -> dict:
    project, languages = await join_or_cancel(
        client.get_project(project_id),
        client.list_project_languages(project_id),
    )
    merged = merge_project_detail(project, languages)
    logger.info(
        f"Loaded project \"{merged.get('name')}\" with {len(merged['languages'])} languages",
        extra={"project_id": project_id},
    )
    return {"project": merged}
