"""Project Routes — project selection, project detail and contributors.

Invariants:
    - GET /api/projects/{project_id} returns metadata fields at the top level of
      data.project, with languages attached beside them
    - Contributor creation failures always surface (write path)
"""

import logging

from fastapi import APIRouter, Depends

from lokalise_proxy.api.dependencies import get_lokalise_client, get_project_id
from lokalise_proxy.api.responses import success_response
from lokalise_proxy.core.domain_types import ProjectId
from lokalise_proxy.infrastructure.lokalise_client import LokaliseClient
from lokalise_proxy.schemas.contributors import CreateContributorsRequest
from lokalise_proxy.services.project_detail import get_project_detail

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("")
async def list_projects(client: LokaliseClient = Depends(get_lokalise_client)):
    """Projects visible to the caller's token (plugin "Choose Project" list)."""
    result = await client.list_projects()
    logger.info(f"Fetched {len(result.get('projects') or [])} Lokalise projects")
    return success_response(result)


@router.get("/{project_id}")
async def get_project(
    project_id: ProjectId = Depends(get_project_id),
    client: LokaliseClient = Depends(get_lokalise_client),
):
    return success_response(await get_project_detail(client, project_id))


@router.get("/{project_id}/contributors")
async def list_contributors(
    project_id: ProjectId = Depends(get_project_id),
    client: LokaliseClient = Depends(get_lokalise_client),
):
    return success_response(await client.list_contributors(project_id))


@router.get("/{project_id}/contributors/{contributor_id}")
async def get_contributor(
    contributor_id: int,
    project_id: ProjectId = Depends(get_project_id),
    client: LokaliseClient = Depends(get_lokalise_client),
):
    return success_response(await client.get_contributor(project_id, contributor_id))


@router.post("/{project_id}/contributors")
async def create_contributors(
    body: CreateContributorsRequest,
    project_id: ProjectId = Depends(get_project_id),
    client: LokaliseClient = Depends(get_lokalise_client),
):
    contributors = body.upstream_contributors()
    logger.info(
        f"Adding {len(contributors)} contributors",
        extra={"project_id": project_id},
    )
    result = await client.create_contributors(project_id, contributors)
    return success_response(result, created=len(result.get("contributors") or []))
