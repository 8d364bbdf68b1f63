"""Request Dependencies — builds lookup lists for the pure resolver and wires clients.

Invariants:
    - Credential precedence: Authorization Bearer → X-Api-Token → Lokalise-Api-Token
      → LOKALISE_API_TOKEN setting
    - Scope precedence: path project_id → body projectId → query projectId
      (legacy alias projektId) → [authentication-stage scope] → LOKALISE_PROJECT_ID
    - This module is the only place where settings fallbacks join request data
    - One LokaliseClient per request, closed when the request ends

Design Decisions:
    - Two stages mirror the route wiring: every route authenticates; only routes
      that act on a project add get_project_id
    - get_upstream_transport is a seam for tests (httpx.MockTransport); production
      returns None and httpx uses its default transport
"""

from collections.abc import AsyncIterator
from typing import Any

import httpx
from fastapi import Depends, Request

from lokalise_proxy.config import Settings, get_settings
from lokalise_proxy.core.domain_types import CredentialSource, ProjectId, ScopeSource
from lokalise_proxy.core.request_context import (
    Lookup, RequestContext, bearer_token, require_scope, resolve_context,
)
from lokalise_proxy.infrastructure.lokalise_client import LokaliseClient
from lokalise_proxy.services.translation_aggregator import TranslationAggregator

_BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


async def read_json_body(request: Request) -> dict[str, Any]:
    """JSON object body, or {} when there is none (or it is not an object)."""
    if request.method not in _BODY_METHODS:
        return {}
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _as_text(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return None


def credential_lookups(request: Request, settings: Settings) -> list[Lookup]:
    headers = request.headers
    return [
        (CredentialSource.AUTHORIZATION_HEADER.value, bearer_token(headers.get("authorization"))),
        (CredentialSource.API_TOKEN_HEADER.value, headers.get("x-api-token")),
        (CredentialSource.LOKALISE_TOKEN_HEADER.value, headers.get("lokalise-api-token")),
        (CredentialSource.ENVIRONMENT.value, settings.lokalise_api_token),
    ]


def scope_lookups(
    request: Request,
    body: dict[str, Any],
    settings: Settings,
    resolved: str | None = None,
    include_resolved: bool = False,
) -> list[Lookup]:
    query = request.query_params
    lookups: list[Lookup] = [
        (ScopeSource.PATH.value, request.path_params.get("project_id")),
        (ScopeSource.BODY.value, _as_text(body.get("projectId"))),
        (ScopeSource.QUERY.value, query.get("projectId") or query.get("projektId")),
    ]
    if include_resolved:
        lookups.append((ScopeSource.RESOLVED.value, resolved))
    lookups.append((ScopeSource.ENVIRONMENT.value, settings.lokalise_project_id))
    return lookups


async def get_request_context(
    request: Request, settings: Settings = Depends(get_settings),
) -> RequestContext:
    """Authentication stage: credential required, scope optional."""
    body = await read_json_body(request)
    return resolve_context(
        credential_lookups(request, settings),
        scope_lookups(request, body, settings),
    )


async def get_project_id(
    request: Request,
    context: RequestContext = Depends(get_request_context),
    settings: Settings = Depends(get_settings),
) -> ProjectId:
    """Scope-requiring stage: 400 with accepted locations when nothing resolves."""
    body = await read_json_body(request)
    return require_scope(scope_lookups(
        request, body, settings,
        resolved=context.scope_id, include_resolved=True,
    ))


def get_upstream_transport() -> httpx.AsyncBaseTransport | None:
    return None


async def get_lokalise_client(
    context: RequestContext = Depends(get_request_context),
    settings: Settings = Depends(get_settings),
    transport: httpx.AsyncBaseTransport | None = Depends(get_upstream_transport),
) -> AsyncIterator[LokaliseClient]:
    async with LokaliseClient(
        context.credential,
        base_url=settings.lokalise_base_url,
        timeout_seconds=settings.lokalise_timeout_seconds,
        transport=transport,
    ) as client:
        yield client


def get_translation_aggregator(
    client: LokaliseClient = Depends(get_lokalise_client),
    settings: Settings = Depends(get_settings),
) -> TranslationAggregator:
    return TranslationAggregator.from_settings(client, settings)
