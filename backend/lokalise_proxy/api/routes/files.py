"""File Routes — translation file upload (base64-normalized) and bundle download.

Invariants:
    - Upload forwards every caller option; data is normalized by the payload codec
      and data_encoded never reaches Lokalise
    - Download defaults: format=json, original_filenames=true
"""

import logging

from fastapi import APIRouter, Depends

from lokalise_proxy.api.dependencies import get_lokalise_client, get_project_id
from lokalise_proxy.api.responses import success_response
from lokalise_proxy.core.domain_types import ProjectId
from lokalise_proxy.infrastructure.lokalise_client import LokaliseClient
from lokalise_proxy.schemas.files import DownloadFilesRequest, UploadFileRequest
from lokalise_proxy.services.file_upload import upload_file as upload_to_lokalise

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/files", tags=["files"])


@router.post("/{project_id}/upload")
async def upload_file(
    body: UploadFileRequest,
    project_id: ProjectId = Depends(get_project_id),
    client: LokaliseClient = Depends(get_lokalise_client),
):
    result = await upload_to_lokalise(
        client, project_id, body.to_upstream(), already_encoded=body.data_encoded,
    )
    process = result.get("process") or {}
    logger.info(
        f"File uploaded, process {process.get('process_id')} is {process.get('status')}",
        extra={"project_id": project_id, "upload_filename": body.filename},
    )
    return success_response(result, process_id=process.get("process_id"))


@router.post("/{project_id}/download")
async def download_files(
    body: DownloadFilesRequest | None = None,
    project_id: ProjectId = Depends(get_project_id),
    client: LokaliseClient = Depends(get_lokalise_client),
):
    options = (body or DownloadFilesRequest()).to_upstream()
    logger.info(
        f"Downloading files as {options['format']}",
        extra={"project_id": project_id},
    )
    result = await client.download_files(project_id, options)
    return success_response(result, bundle_url=result.get("bundle_url"))
