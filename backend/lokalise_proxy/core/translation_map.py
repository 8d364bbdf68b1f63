"""Translation Map — reshapes Lokalise keys into locale -> key name -> text.

Invariants:
    - Exactly one inner mapping per requested locale, empty when nothing matches
    - Locales that were not requested never appear (no fabricated records)
    - Empty translation text is skipped (no "" placeholders)
    - Name collisions: the later key in upstream order wins, per locale
    - Pure: input keys are never mutated

Design Decisions:
    - Per-platform key names ({"ios": ..., "web": ...}) reduce to their first
      value; Lokalise keeps the same name on every platform in practice
    - Malformed entries are skipped one by one rather than failing the batch
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from lokalise_proxy.core.domain_types import LocaleTranslationMap


def resolve_key_name(raw_name: Any) -> str | None:
    """Display name of a key; None when the key has no usable name."""
    if isinstance(raw_name, Mapping):
        raw_name = next(iter(raw_name.values()), None)
    if isinstance(raw_name, str) and raw_name:
        return raw_name
    return None


def normalize_locales(locales: Iterable[Any]) -> list[str]:
    """Strip, drop empties and duplicates; first occurrence keeps its position."""
    seen: list[str] = []
    for locale in locales:
        if not isinstance(locale, str):
            continue
        locale = locale.strip()
        if locale and locale not in seen:
            seen.append(locale)
    return seen


def parse_locale_list(raw: str | None) -> list[str]:
    """Split a comma-separated query value like "fr, de,es"."""
    if not raw:
        return []
    return normalize_locales(raw.split(","))


def empty_translation_map(locales: Iterable[str]) -> LocaleTranslationMap:
    return {locale: {} for locale in locales}


def build_translation_map(
    keys: Iterable[Mapping[str, Any]],
    requested_locales: Sequence[str],
) -> LocaleTranslationMap:
    """Group the embedded translations of `keys` by requested locale."""
    result = empty_translation_map(requested_locales)

    for key in keys:
        name = resolve_key_name(key.get("key_name"))
        if name is None:
            continue
        translations = key.get("translations")
        if not isinstance(translations, list):
            continue

        for entry in translations:
            if not isinstance(entry, Mapping):
                continue
            locale = entry.get("language_iso")
            text = entry.get("translation")
            if isinstance(locale, str) and locale in result and isinstance(text, str) and text:
                result[locale][name] = text

    return result


def count_translations(translation_map: LocaleTranslationMap) -> dict[str, int]:
    return {locale: len(entries) for locale, entries in translation_map.items()}
