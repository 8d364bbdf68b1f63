"""Request Context Resolution — credential and project scope from ordered lookups.

Invariants:
    - Pure: no environment access, no I/O; callers pass every candidate explicitly
    - First non-empty lookup wins; None, "" and whitespace-only values are absent
    - RequestContext is immutable and never cached across requests
    - The credential never appears in repr() or in error messages

Design Decisions:
    - Lookups are (source_label, value) pairs: the labels double as the list of
      accepted locations reported back when nothing resolves
    - Environment fallbacks are appended by the API boundary (api/dependencies.py),
      keeping this module deterministic and trivially testable
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace

from lokalise_proxy.core.domain_types import ApiToken, ProjectId
from lokalise_proxy.core.errors import AuthenticationError, ValidationError

Lookup = tuple[str, str | None]

_BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class RequestContext:
    """Resolved per-request identity: who is calling and which project."""
    credential: ApiToken = field(repr=False)
    scope_id: ProjectId | None = None

    def with_scope(self, scope_id: ProjectId) -> "RequestContext":
        return replace(self, scope_id=scope_id)


def first_present(lookups: Iterable[Lookup]) -> tuple[str, str] | None:
    """Return (source, value) of the first lookup holding a usable value."""
    for source, value in lookups:
        if isinstance(value, str) and value.strip():
            return source, value.strip()
    return None


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an `Authorization: Bearer <token>` header value."""
    if authorization and authorization.startswith(_BEARER_PREFIX):
        return authorization[len(_BEARER_PREFIX):]
    return None


def resolve_credential(lookups: Sequence[Lookup]) -> ApiToken:
    found = first_present(lookups)
    if found is None:
        raise AuthenticationError(
            "Missing Lokalise API token. Builder.io plugin should send: "
            "Authorization: Bearer {your-lokalise-token}",
            accepted_sources=[source for source, _ in lookups],
        )
    return ApiToken(found[1])


def resolve_scope(lookups: Sequence[Lookup]) -> ProjectId | None:
    """Optional scope resolution (authentication stage)."""
    found = first_present(lookups)
    return ProjectId(found[1]) if found else None


def require_scope(lookups: Sequence[Lookup]) -> ProjectId:
    """Scope resolution for stages that cannot proceed without a project.

    Raises ValidationError listing every accepted input location.
    """
    scope = resolve_scope(lookups)
    if scope is None:
        raise ValidationError(
            "Project ID is required. Provide via URL parameter, request body, "
            "or query parameter.",
            field="projectId",
            details={"accepted_locations": [source for source, _ in lookups]},
        )
    return scope


def resolve_context(
    credential_lookups: Sequence[Lookup],
    scope_lookups: Sequence[Lookup],
) -> RequestContext:
    """Authentication stage: credential is mandatory, scope is optional."""
    return RequestContext(
        credential=resolve_credential(credential_lookups),
        scope_id=resolve_scope(scope_lookups),
    )
