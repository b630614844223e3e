"""Structured Logging — JSON formatter, correlation ids and setup.

Invariants:
    - All logs include timestamp, level, logger name, message and correlation_id
    - Extra fields (api, identifier, error_code, path) surfaced when present
    - JSON format in production, human-readable in development
    - correlation_id_var is request-scoped (ContextVar), default "<not-set>"
"""

import json
import logging
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone

SERVICE_PREFIX = "CTX"

correlation_id_var: ContextVar[str] = ContextVar(
    "correlation_id", default="<not-set>",
)

_EXTRA_KEYS = ("api", "identifier", "error_code", "path")


def generate_correlation_id(prefix: str = SERVICE_PREFIX) -> str:
    return f"{prefix}:{uuid.uuid4()}"


class CorrelationIdFilter(logging.Filter):
    """Attaches the current correlation id to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = correlation_id_var.get()
        return True


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "correlation_id": getattr(
                record, "correlation_id", correlation_id_var.get(),
            ),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure root logging, replacing any existing root handlers."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s [corr_id=%(correlation_id)s] "
            "%(name)s - %(message)s",
        ))
    handler.addFilter(CorrelationIdFilter())
    logging.root.handlers.clear()
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
