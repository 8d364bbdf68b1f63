"""Task Routes — translation tasks for project contributors.

Invariants:
    - task_id must be an integer (400 otherwise)
    - Task creation failures always surface (write path)
"""

import logging

from fastapi import APIRouter, Depends

from lokalise_proxy.api.dependencies import get_lokalise_client, get_project_id
from lokalise_proxy.api.responses import success_response
from lokalise_proxy.core.domain_types import ProjectId
from lokalise_proxy.infrastructure.lokalise_client import LokaliseClient
from lokalise_proxy.schemas.tasks import CreateTaskRequest

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("/{project_id}")
async def list_tasks(
    project_id: ProjectId = Depends(get_project_id),
    client: LokaliseClient = Depends(get_lokalise_client),
):
    result = await client.list_tasks(project_id)
    return success_response(result, count=len(result.get("tasks") or []))


@router.get("/{project_id}/{task_id}")
async def get_task(
    task_id: int,
    project_id: ProjectId = Depends(get_project_id),
    client: LokaliseClient = Depends(get_lokalise_client),
):
    return success_response(await client.get_task(project_id, task_id))


@router.post("/{project_id}")
async def create_task(
    body: CreateTaskRequest,
    project_id: ProjectId = Depends(get_project_id),
    client: LokaliseClient = Depends(get_lokalise_client),
):
    task = body.to_upstream()
    logger.info(
        f"Creating task \"{body.title}\" for "
        f"{', '.join(lang.language_iso for lang in body.languages)}",
        extra={"project_id": project_id},
    )
    result = await client.create_task(project_id, task)
    created = result.get("task") or {}
    return success_response(result, task_id=created.get("task_id"))
