"""Error Hierarchy — typed, categorized exceptions for all Context API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - category is the error-kind tag: VALIDATION for client errors,
      EXTERNAL_API for backend failures
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ContextApiError base: one FastAPI global handler catches all
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from context_api.core.domain_types import IdentifierField


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request details attached to an error for debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    field: str | None = None
    value: str | None = None
    api: str | None = None
    debug_info: dict[str, Any] | None = None


class ContextApiError(Exception):
    """Base exception for all Context API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "field": self.context.field,
                    "value": self.context.value,
                    "api": self.context.api,
                },
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

INVALID_CONTEXT_ID = "INVALID_CONTEXT_ID"


class InvalidIdentifierError(ContextApiError):
    """Category, context or item id failed validation."""
    def __init__(
        self,
        field: IdentifierField,
        value: str | None,
        context: ErrorContext | None = None,
    ):
        label = field.value.capitalize()
        ctx = context or ErrorContext()
        ctx.field = field.value
        ctx.value = value
        super().__init__(
            f"Invalid {label} Id. {label} Id = {value}",
            INVALID_CONTEXT_ID, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.field = field
        self.value = value


# ─── Backend Failures (500-level) ───────────────────────────────

class ServiceFailureError(ContextApiError):
    """Item service or response assembly failed. Never caught by handlers."""


class ItemServiceError(ServiceFailureError):
    """Item service answered with an error status or an unreadable body."""
    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Item service error: {message}",
            "ITEM_SERVICE_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 502,
        )
        self.status_code = status_code


class ItemServiceUnavailableError(ServiceFailureError):
    """Item service could not be reached or timed out."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Item service unavailable: {message}",
            "ITEM_SERVICE_UNAVAILABLE", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 503,
        )
