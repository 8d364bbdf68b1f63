"""Project Detail Merge — flat merge of project metadata and its language list.

Invariants:
    - Every top-level field of the metadata body survives unchanged
    - `languages` is attached at top level, always a list (empty when missing)
    - Inputs are not mutated
"""

from collections.abc import Mapping
from typing import Any


def merge_project_detail(
    project: Mapping[str, Any], languages_body: Mapping[str, Any],
) -> dict[str, Any]:
    languages = (
        languages_body.get("languages") if isinstance(languages_body, Mapping) else None
    )
    return {
        **project,
        "languages": list(languages) if isinstance(languages, list) else [],
    }
