"""Upstream Payload Base — pass-through models with proxy-only fields stripped."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

# Scope may travel in the body; Lokalise must never see it
SCOPE_FIELDS = frozenset({"projectId", "projektId"})


class UpstreamPayload(BaseModel):
    """Request body forwarded to Lokalise (extra fields allowed)."""

    model_config = ConfigDict(extra="allow")

    # Fields consumed by the proxy itself
    proxy_only_fields: ClassVar[frozenset[str]] = frozenset()

    def to_upstream(self) -> dict:
        return self.model_dump(
            exclude=set(SCOPE_FIELDS | self.proxy_only_fields),
            exclude_none=True,
        )
