"""File Upload — normalizes `data` to base64 before forwarding to Lokalise.

Invariants:
    - The forwarded payload carries every caller field, with `data` replaced by
      its transport form (core/payload_codec.py)
    - Upload failures are always surfaced (write path, no degradation)
    - File content is never logged, only lengths and the encoding decision
"""

import logging
from typing import Any

from lokalise_proxy.core.payload_codec import normalize
from lokalise_proxy.infrastructure.lokalise_client import LokaliseClient

logger = logging.getLogger(__name__)


def build_upload_payload(
    payload: dict[str, Any], already_encoded: bool | None = None,
) -> dict[str, Any]:
    raw = payload["data"]
    return {**payload, "data": normalize(raw, already_encoded)}


async def upload_file(
    client: LokaliseClient,
    project_id: str,
    payload: dict[str, Any],
    already_encoded: bool | None = None,
) -> dict:
    upload_payload = build_upload_payload(payload, already_encoded)
    passed_through = upload_payload["data"] == payload["data"]
    logger.info(
        f"Uploading file ({'data already base64' if passed_through else 'text encoded to base64'}, "
        f"{len(payload['data'])} -> {len(upload_payload['data'])} chars)",
        extra={
            "project_id": project_id,
            "upload_filename": payload.get("filename"),
            "lang_iso": payload.get("lang_iso"),
        },
    )
    return await client.upload_file(project_id, upload_payload)
