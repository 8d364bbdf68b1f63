"""Error Hierarchy — typed, categorized exceptions for every proxy failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors (400-level) are reported immediately; upstream errors keep the
      upstream status code so callers can tell upstream outages from local faults
    - to_response() produces the uniform {success, error} envelope
    - No credential value ever appears in a message or in details

Design Decisions:
    - Single hierarchy with ProxyError base: one FastAPI handler renders all of them
    - ErrorContext as dataclass: timestamp and debug data travel with the error,
      not through the logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    RATE_LIMIT = "rate_limit"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    project_id: str | None = None
    debug_info: dict[str, Any] | None = None


class ProxyError(Exception):
    """Base exception for all proxy errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.details = details

    def to_response(self) -> dict:
        """Convert to the uniform error envelope."""
        error: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "timestamp": self.context.timestamp.isoformat(),
        }
        if self.details is not None:
            error["details"] = self.details
        return {"success": False, "error": error}


# ─── Request Errors (400-level) ─────────────────────────────────

class AuthenticationError(ProxyError):
    """No credential could be resolved for the request."""
    def __init__(
        self,
        message: str = "missing credential",
        accepted_sources: list[str] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "AUTHENTICATION_ERROR", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.ERROR, context, 401,
            details={"accepted_sources": accepted_sources} if accepted_sources else None,
        )
        self.accepted_sources = accepted_sources or []


class ValidationError(ProxyError):
    """Missing scope, empty locale set, or malformed payload."""
    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: Any = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400, details=details,
        )
        self.field = field

    def to_response(self) -> dict:
        response = super().to_response()
        if self.field:
            response["error"]["field"] = self.field
        return response


class RateLimitError(ProxyError):
    """Too many requests from one client address within the window."""
    def __init__(
        self,
        limit: str,
        message: str = "Too many requests from this IP, please try again later.",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "RATE_LIMIT_EXCEEDED", ErrorCategory.RATE_LIMIT,
            ErrorSeverity.WARNING, context, 429, details={"limit": limit},
        )
        self.limit = limit


# ─── Upstream Errors (status passed through) ────────────────────

class UpstreamError(ProxyError):
    """Non-success response (or no usable response) from the Lokalise API."""
    def __init__(
        self,
        status_code: int,
        message: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Lokalise API error: {status_code} - {message}",
            "UPSTREAM_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL if status_code >= 500 else ErrorSeverity.ERROR,
            context, status_code,
        )
        self.status_code = status_code
        self.upstream_message = message

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["status_code"] = self.status_code
        return response
