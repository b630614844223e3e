"""App Factory — explicit collaborators, route prefix, lifespan-owned client.

Tests:
    - api_prefix mounts the recommendation routes under it (health stays at root)
    - default response builder and validator are installed
    - lifespan creates an ItemServiceClient when none is injected, and clears it on exit
"""

from httpx import ASGITransport, AsyncClient

from context_api.config import Settings
from context_api.core.validate_identifier import RequestParamValidator
from context_api.infrastructure.item_service_client import ItemServiceClient
from context_api.main import create_app
from context_api.services.response_builder import ContextResponseBuilder
from tests.fakes import FakeItemService


async def test_api_prefix_mounts_routes():
    item_service = FakeItemService()
    app = create_app(
        item_service=item_service,
        settings=Settings(api_prefix="api/v1/", log_format="text"),
    )
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        prefixed = await c.get("/api/v1/item/1234567/alsoviewed")
        bare = await c.get("/item/1234567/alsoviewed")
        health = await c.get("/health/")

    assert prefixed.status_code == 200
    assert bare.status_code == 404
    assert health.status_code == 200
    assert len(item_service.calls) == 1


def test_defaults_installed():
    app = create_app(item_service=FakeItemService(), settings=Settings())
    assert isinstance(app.state.response_builder, ContextResponseBuilder)
    assert isinstance(app.state.validator, RequestParamValidator)


async def test_lifespan_owns_default_client():
    app = create_app(
        settings=Settings(item_service_url="http://item-service.test", log_format="text"),
    )
    assert app.state.item_service is None

    async with app.router.lifespan_context(app):
        assert isinstance(app.state.item_service, ItemServiceClient)

    assert app.state.item_service is None


async def test_lifespan_keeps_injected_service():
    item_service = FakeItemService()
    app = create_app(item_service=item_service, settings=Settings(log_format="text"))

    async with app.router.lifespan_context(app):
        assert app.state.item_service is item_service

    assert app.state.item_service is item_service
