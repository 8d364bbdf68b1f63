"""Response Envelope — {success, data, timestamp, ...} for every successful call."""

from datetime import datetime, timezone
from typing import Any


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def success_response(data: Any, **extra: Any) -> dict[str, Any]:
    """Envelope consumed by the Builder.io plugin; extra keys sit beside data."""
    return {"success": True, "data": data, **extra, "timestamp": utc_timestamp()}
