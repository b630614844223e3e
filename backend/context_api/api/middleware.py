"""Correlation Middleware — tags every request and log line with X-Correlation-ID.

Invariants:
    - Incoming X-Correlation-ID is reused; otherwise a CTX:<uuid> id is generated
    - The id is echoed on the response and reset after the request
"""

from fastapi import FastAPI, Request

from context_api.infrastructure.observability import (
    correlation_id_var, generate_correlation_id,
)

CORRELATION_HEADER = "X-Correlation-ID"


def register_correlation_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def add_correlation_id(request: Request, call_next):
        correlation_id = (
            request.headers.get(CORRELATION_HEADER) or generate_correlation_id()
        )
        token = correlation_id_var.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
