"""File Schemas — upload and download bodies.

Invariants:
    - Upload requires data, filename and lang_iso as non-empty strings
    - data_encoded is proxy-only: it steers the payload codec and is never forwarded
    - Download defaults to JSON with original filenames, overridable by the caller
"""

from typing import ClassVar

from pydantic import Field

from lokalise_proxy.schemas.base import UpstreamPayload


class UploadFileRequest(UpstreamPayload):
    proxy_only_fields: ClassVar[frozenset[str]] = frozenset({"data_encoded"})

    data: str = Field(min_length=1)
    filename: str = Field(min_length=1)
    lang_iso: str = Field(min_length=1)
    data_encoded: bool | None = Field(
        None,
        description="True if data is already base64, False if it is plain text. "
        "When omitted the proxy infers it.",
    )
    convert_placeholders: bool | None = None
    detect_icu_plurals: bool | None = None
    replace_modified: bool | None = None
    tags: list[str] | None = None


class DownloadFilesRequest(UpstreamPayload):
    format: str = "json"
    original_filenames: bool = True
    bundle_structure: str | None = None
    filter_langs: list[str] | None = None
    filter_data: list[str] | None = None
