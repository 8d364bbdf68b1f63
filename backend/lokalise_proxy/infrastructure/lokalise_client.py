"""Lokalise API Client — thin async wrapper over api.lokalise.com/api2.

Invariants:
    - Every call carries the per-request credential in the X-Api-Token header
    - Single attempt per call: no retries (writes such as key, task and
      translation creation are not idempotent)
    - Non-2xx responses become UpstreamError with the upstream status preserved;
      message = error.message, else message, else the HTTP reason phrase
    - Transport failures map to UpstreamError 504 (timeout) / 502 (connection,
      undecodable body)
    - The credential never reaches a log record

Design Decisions:
    - One client per request (built from RequestContext): no credential is ever
      shared between callers
    - Transport injectable: tests swap in httpx.MockTransport instead of patching
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from lokalise_proxy.core.errors import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.lokalise.com/api2"
NEXT_CURSOR_HEADER = "X-Pagination-Next-Cursor"


def _segment(value: str | int) -> str:
    """Quote a path segment so ids cannot escape their position in the URL."""
    return quote(str(value), safe="")


def extract_error_message(response: httpx.Response) -> str:
    """Human-readable message from a failed Lokalise response."""
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if data.get("message"):
            return str(data["message"])
    return response.reason_phrase or "Unknown error"


class LokaliseClient:
    """Authenticated access to the Lokalise REST API for one request."""

    def __init__(
        self,
        api_token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "X-Api-Token": api_token,
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            timeout=timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> "LokaliseClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # ─── Core request ───────────────────────────────────────────

    async def request(
        self,
        path: str,
        method: str = "GET",
        body: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Issue one authenticated call and return the parsed JSON body."""
        response = await self._send(path, method, body, params)
        return self._parse_json(response, method, path)

    async def _send(
        self,
        path: str,
        method: str,
        body: Any,
        params: dict[str, Any] | None,
    ) -> httpx.Response:
        try:
            response = await self._client.request(
                method, path, json=body, params=params,
            )
        except httpx.TimeoutException as e:
            logger.error(
                f"Lokalise API timeout: {method} {path}",
                extra={"method": method, "path": path, "upstream_status": 504},
            )
            raise UpstreamError(504, "Request to Lokalise timed out") from e
        except httpx.TransportError as e:
            logger.error(
                f"Lokalise API unreachable: {method} {path}: {e}",
                extra={"method": method, "path": path, "upstream_status": 502},
            )
            raise UpstreamError(502, "Could not reach Lokalise") from e

        if not response.is_success:
            raise self._to_upstream_error(response, method, path)
        return response

    def _to_upstream_error(
        self, response: httpx.Response, method: str, path: str,
    ) -> UpstreamError:
        message = extract_error_message(response)
        status_code = response.status_code
        logger.error(
            f"Lokalise API error: {status_code} {response.reason_phrase} ({method} {path}): {message}",
            extra={"upstream_status": status_code, "method": method, "path": path},
        )
        # Only client/server error statuses are meaningful to pass through
        if status_code < 400:
            status_code = 502
        return UpstreamError(status_code, message)

    def _parse_json(self, response: httpx.Response, method: str, path: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.error(
                f"Lokalise API returned a non-JSON body: {method} {path}",
                extra={"method": method, "path": path, "upstream_status": response.status_code},
            )
            raise UpstreamError(502, "Lokalise returned an unreadable response") from e

    # ─── Projects ───────────────────────────────────────────────

    async def list_projects(self, params: dict[str, Any] | None = None) -> dict:
        return await self.request("projects", params=params)

    async def get_project(self, project_id: str) -> dict:
        return await self.request(f"projects/{_segment(project_id)}")

    async def list_project_languages(self, project_id: str) -> dict:
        return await self.request(f"projects/{_segment(project_id)}/languages")

    # ─── Keys ───────────────────────────────────────────────────

    async def list_keys(self, project_id: str, params: dict[str, Any] | None = None) -> dict:
        return await self.request(f"projects/{_segment(project_id)}/keys", params=params)

    async def list_keys_page(
        self,
        project_id: str,
        *,
        limit: int,
        cursor: str | None = None,
        include_translations: bool = True,
    ) -> tuple[dict, str | None]:
        """One page of keys using cursor pagination.

        Returns (body, next_cursor); next_cursor is None on the last page.
        """
        path = f"projects/{_segment(project_id)}/keys"
        params: dict[str, Any] = {"pagination": "cursor", "limit": limit}
        if include_translations:
            params["include_translations"] = 1
        if cursor:
            params["cursor"] = cursor
        response = await self._send(path, "GET", None, params)
        body = self._parse_json(response, "GET", path)
        next_cursor = response.headers.get(NEXT_CURSOR_HEADER) or None
        return body, next_cursor

    async def create_keys(self, project_id: str, keys: list[dict]) -> dict:
        return await self.request(
            f"projects/{_segment(project_id)}/keys", "POST", {"keys": keys},
        )

    # ─── Translations ───────────────────────────────────────────

    async def update_translations(self, project_id: str, translations: list[dict]) -> dict:
        return await self.request(
            f"projects/{_segment(project_id)}/translations", "POST",
            {"translations": translations},
        )

    # ─── Files ──────────────────────────────────────────────────

    async def upload_file(self, project_id: str, payload: dict) -> dict:
        """POST files/upload. `payload["data"]` must already be base64."""
        return await self.request(
            f"projects/{_segment(project_id)}/files/upload", "POST", payload,
        )

    async def download_files(self, project_id: str, options: dict) -> dict:
        return await self.request(
            f"projects/{_segment(project_id)}/files/download", "POST", options,
        )

    # ─── Contributors ───────────────────────────────────────────

    async def list_contributors(self, project_id: str) -> dict:
        return await self.request(f"projects/{_segment(project_id)}/contributors")

    async def get_contributor(self, project_id: str, contributor_id: int) -> dict:
        return await self.request(
            f"projects/{_segment(project_id)}/contributors/{_segment(contributor_id)}",
        )

    async def create_contributors(self, project_id: str, contributors: list[dict]) -> dict:
        return await self.request(
            f"projects/{_segment(project_id)}/contributors", "POST",
            {"contributors": contributors},
        )

    # ─── Tasks ──────────────────────────────────────────────────

    async def list_tasks(self, project_id: str) -> dict:
        return await self.request(f"projects/{_segment(project_id)}/tasks")

    async def get_task(self, project_id: str, task_id: int) -> dict:
        return await self.request(
            f"projects/{_segment(project_id)}/tasks/{_segment(task_id)}",
        )

    async def create_task(self, project_id: str, task: dict) -> dict:
        return await self.request(
            f"projects/{_segment(project_id)}/tasks", "POST", task,
        )
