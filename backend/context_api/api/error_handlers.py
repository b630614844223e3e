"""Error Handlers — map exceptions to the REST error envelope.

Invariants:
    - Every error body is {"error": {code, message, category, severity, ...}}
    - ContextApiError → its own http_status and to_response()
    - Query/path parameter validation failures → 400 VALIDATION_ERROR with per-field details
    - Anything else → 500 INTERNAL_ERROR; the exception text is logged, never returned
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from context_api.core.errors import ContextApiError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def _envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity,
    **extra,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **extra,
        },
    }


def _field_errors(exc: RequestValidationError) -> list[dict]:
    """One entry per rejected parameter, e.g. {"field": "query.page", ...}."""
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]


async def handle_context_api_error(request: Request, exc: ContextApiError):
    # 4xx is the caller's problem, 5xx is ours or the item service's
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path, "api": exc.context.api},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    details = _field_errors(exc)
    logger.warning(
        f"Rejected parameters on {request.url.path}: "
        f"{', '.join(d['field'] for d in details)}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request parameters",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, details=details,
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(
        f"Unhandled {type(exc).__name__} on {request.url.path}",
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


_HANDLERS = (
    (ContextApiError, handle_context_api_error),
    (RequestValidationError, handle_request_validation_error),
    (Exception, handle_unexpected_error),
)


def register_error_handlers(app: FastAPI) -> None:
    for exc_class, handler in _HANDLERS:
        app.add_exception_handler(exc_class, handler)
