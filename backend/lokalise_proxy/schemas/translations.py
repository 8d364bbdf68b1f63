"""Translation Schemas — aggregation requests and translation updates.

Invariants:
    - targetLocales must be a non-empty list (blank entries are rejected later by
      the aggregator, after trimming)
    - Each update names key_id, language_iso and the translated text
"""

from pydantic import ConfigDict, Field

from lokalise_proxy.schemas.base import UpstreamPayload


class FetchTranslationsRequest(UpstreamPayload):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    target_locales: list[str] = Field(alias="targetLocales", min_length=1)


class TranslationUpdate(UpstreamPayload):
    key_id: int
    language_iso: str = Field(min_length=1)
    translation: str
    is_fuzzy: bool | None = None
    is_reviewed: bool | None = None


class UpdateTranslationsRequest(UpstreamPayload):
    translations: list[TranslationUpdate] = Field(min_length=1)

    def upstream_translations(self) -> list[dict]:
        return [t.to_upstream() for t in self.translations]
