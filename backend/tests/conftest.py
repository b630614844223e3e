"""Root conftest — collaborator fixtures and an HTTP client over the app.

Invariants:
    - The app under test never talks to a real item service
    - Lifespan is not run by ASGITransport; collaborators are injected via create_app
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Keep tests away from a developer's local backend
os.environ.setdefault("ITEM_SERVICE_URL", "http://item-service.test")

from context_api.config import Settings  # noqa: E402
from context_api.core.validate_identifier import RequestParamValidator  # noqa: E402
from context_api.main import create_app  # noqa: E402
from tests.fakes import FakeItemService, RecordingResponseBuilder  # noqa: E402


@pytest.fixture
def item_service():
    return FakeItemService()


@pytest.fixture
def response_builder():
    return RecordingResponseBuilder()


@pytest.fixture
def validator():
    return RequestParamValidator()


@pytest.fixture
def settings():
    return Settings(
        item_service_url="http://item-service.test", log_format="text",
    )


@pytest.fixture
def app(item_service, response_builder, validator, settings):
    return create_app(
        item_service=item_service,
        response_builder=response_builder,
        validator=validator,
        settings=settings,
    )


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
