"""Error Handlers & Middleware — envelopes, catch-all, correlation ids.

Tests:
    - Unexpected exceptions → 500 INTERNAL_ERROR without internal details
    - Parameter validation failures → 400 VALIDATION_ERROR listing each field
    - X-Correlation-ID echoed when sent, generated otherwise
"""

from httpx import ASGITransport, AsyncClient


async def test_unhandled_exception_returns_generic_500(app, item_service):
    item_service.results["find_also_viewed_items_for_item"] = RuntimeError(
        "secret backend detail",
    )
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.get("/item/1234567/alsoviewed")

    assert res.status_code == 500
    body = res.json()
    assert body["error"]["code"] == "INTERNAL_ERROR"
    assert body["error"]["category"] == "internal"
    assert body["error"]["severity"] == "critical"
    assert "secret" not in res.text


async def test_validation_error_lists_fields(client):
    res = await client.get("/item/1234567/alsoviewed?page=0")
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["category"] == "validation"
    details = error["details"]
    assert any(d["field"] == "query.page" for d in details)


async def test_correlation_id_echoed(client):
    res = await client.get(
        "/health/", headers={"X-Correlation-ID": "test-corr-1"},
    )
    assert res.headers["X-Correlation-ID"] == "test-corr-1"


async def test_correlation_id_generated(client):
    res = await client.get("/item/1234567/alsoviewed")
    assert res.headers["X-Correlation-ID"].startswith("CTX:")


async def test_correlation_id_on_error_responses(client):
    res = await client.get("/item//alsoviewed")
    assert res.status_code == 400
    assert res.headers["X-Correlation-ID"].startswith("CTX:")
