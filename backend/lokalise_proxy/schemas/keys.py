"""Key Schemas — translation key creation."""

from pydantic import Field

from lokalise_proxy.schemas.base import UpstreamPayload


class KeyCreate(UpstreamPayload):
    """One key as sent by the plugin (human-readable name, platforms, ...)."""
    key_name: str = Field(min_length=1)
    description: str | None = None
    platforms: list[str] | None = None
    tags: list[str] | None = None


class CreateKeysRequest(UpstreamPayload):
    keys: list[KeyCreate] = Field(min_length=1)

    def upstream_keys(self) -> list[dict]:
        return [key.to_upstream() for key in self.keys]
