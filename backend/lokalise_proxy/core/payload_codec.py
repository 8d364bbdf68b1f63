"""Payload Codec — decides whether upload data is already base64 or literal text.

Invariants:
    - Output is always standard-alphabet base64 (Lokalise rejects anything else)
    - Already-encoded input passes through byte-identical (never double-encoded)
    - Strings of 100 characters or fewer are always treated as plain text
    - Plain text is encoded from its UTF-8 bytes

Design Decisions:
    - Heuristic kept for compatibility: callers are not required to say which form
      they send. Known limitation: a long plain-text payload made only of base64
      alphabet characters is misclassified as already encoded.
    - Optional explicit flag (already_encoded) wins over the heuristic when given
"""

import base64
import re

MIN_ENCODED_LENGTH = 100

_BASE64_PATTERN = re.compile(r"[A-Za-z0-9+/]+=*")


def looks_base64_encoded(raw: str) -> bool:
    """Heuristic: long enough and made only of base64 alphabet + trailing padding."""
    return (
        len(raw) > MIN_ENCODED_LENGTH
        and _BASE64_PATTERN.fullmatch(raw) is not None
    )


def encode_text(raw: str) -> str:
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def normalize(raw: str, already_encoded: bool | None = None) -> str:
    """Return `raw` in transport form (base64).

    already_encoded=True passes through, False always encodes, None applies
    looks_base64_encoded().
    """
    if already_encoded is None:
        already_encoded = looks_base64_encoded(raw)
    if already_encoded:
        return raw
    return encode_text(raw)
