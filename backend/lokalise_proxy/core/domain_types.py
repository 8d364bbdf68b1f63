"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ApiToken is opaque: never logged, never echoed back to callers
    - LocaleCode is matched exactly (no case folding, no region fallback)
    - LocaleTranslationMap holds one inner mapping per requested locale, never more

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and parse from env vars without custom code
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ApiToken = NewType("ApiToken", str)
ProjectId = NewType("ProjectId", str)
LocaleCode = NewType("LocaleCode", str)


# ─── Aggregates ──────────────────────────────────────────────────

# locale -> key name -> translated text
LocaleTranslationMap = dict[str, dict[str, str]]


# ─── Enums ───────────────────────────────────────────────────────

class FetchFailurePolicy(str, Enum):
    """What the read-aggregation path does when the upstream call fails."""
    DEGRADE = "degrade"   # log and return an empty mapping per requested locale
    RAISE = "raise"       # surface the UpstreamError like any other call


class CredentialSource(str, Enum):
    """Where a credential may come from, in precedence order."""
    AUTHORIZATION_HEADER = "Authorization: Bearer <token>"
    API_TOKEN_HEADER = "X-Api-Token header"
    LOKALISE_TOKEN_HEADER = "Lokalise-Api-Token header"
    ENVIRONMENT = "LOKALISE_API_TOKEN environment variable"


class ScopeSource(str, Enum):
    """Where a project id may come from, in precedence order."""
    PATH = "URL: /api/<resource>/{projectId}"
    BODY = 'Body: { "projectId": "your-project-id" }'
    QUERY = "Query: ?projectId=your-project-id"
    RESOLVED = "resolved by the authentication stage"
    ENVIRONMENT = "LOKALISE_PROJECT_ID environment variable"
