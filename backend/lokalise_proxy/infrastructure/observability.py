"""Structured Logging — one JSON object per line for the proxy's request and upstream events.

Invariants:
    - Every line carries timestamp, level, logger name, and message
    - Proxy context (project_id, upstream_status, upload_filename, ...) appears only
      when the caller passed it through `extra`
    - Extra keys never shadow LogRecord attributes (`filename`, `module`, ...);
      logging raises KeyError on such a record, so upload names use upload_filename
    - Tokens and uploaded file content are never passed as extra fields

Design Decisions:
    - Context keys are whitelisted so ad-hoc extras cannot leak request data
    - fmt="text" gives a readable line for local development
    - httpx/httpcore capped at WARNING: they log full request URLs at INFO
"""

import logging
import json
from datetime import datetime, timezone

CONTEXT_FIELDS = (
    "project_id", "upstream_status", "error_code", "path", "method",
    "locale_count", "key_count", "page", "upload_filename", "lang_iso",
    "client_ip",
)

_QUIET_LOGGERS = ("httpx", "httpcore")


class JSONFormatter(logging.Formatter):
    """Render a record and its whitelisted proxy context as a JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update({
            key: record.__dict__[key]
            for key in CONTEXT_FIELDS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install one stream handler on the root logger."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
