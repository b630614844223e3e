"""Context API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Collaborators (item service, response builder, validator) live on app.state;
      create_app() takes them as arguments, lifespan fills in the defaults
    - Global error handlers map ContextApiError → structured JSON responses
    - An ItemServiceClient created by lifespan is closed on shutdown
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from context_api.api.error_handlers import register_error_handlers
from context_api.api.middleware import register_correlation_middleware
from context_api.api.routes import category, context, health, item
from context_api.config import Settings, get_settings
from context_api.core.service_protocols import (
    IdentifierValidator, ItemService, ResponseBuilder,
)
from context_api.core.validate_identifier import RequestParamValidator
from context_api.infrastructure.item_service_client import ItemServiceClient
from context_api.infrastructure.observability import setup_logging
from context_api.services.response_builder import ContextResponseBuilder

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    owned_client = None
    if app.state.item_service is None:
        owned_client = ItemServiceClient(
            settings.item_service_url,
            timeout_seconds=settings.item_service_timeout_seconds,
        )
        app.state.item_service = owned_client
    logger.info(
        f"Context API started (item service: {settings.item_service_url})",
    )
    yield
    if owned_client is not None:
        await owned_client.close()
        app.state.item_service = None
    logger.info("Context API shutting down")


def create_app(
    item_service: ItemService | None = None,
    response_builder: ResponseBuilder | None = None,
    validator: IdentifierValidator | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Build the app with explicit collaborators and an explicit route table."""
    settings = settings or get_settings()

    app = FastAPI(title="Context API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.item_service = item_service
    app.state.response_builder = response_builder or ContextResponseBuilder()
    app.state.validator = validator or RequestParamValidator()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    register_correlation_middleware(app)

    app.include_router(health.router)
    app.include_router(category.router, prefix=settings.api_prefix)
    app.include_router(context.router, prefix=settings.api_prefix)
    app.include_router(item.router, prefix=settings.api_prefix)

    register_error_handlers(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8080)
