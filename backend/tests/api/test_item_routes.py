"""Item Routes — also viewed / also bought.

Tests:
    - api kind reaches the item service and the response metadata
    - GET /item//alsoviewed and /item/%2E%2E/alsoviewed → 400 INVALID_CONTEXT_ID, no lookup
    - item service failures map to 502/503 envelopes
"""

from context_api.core.domain_types import ApiKind
from context_api.core.errors import ItemServiceError, ItemServiceUnavailableError


async def test_also_viewed(client, item_service):
    res = await client.get("/item/1234567/alsoviewed")
    assert res.status_code == 200
    method, args = item_service.calls[0]
    assert method == "find_also_viewed_items_for_item"
    assert args[1] == "1234567"
    assert args[3] is ApiKind.ALSO_VIEWED
    assert res.json()["metadata"]["api"] == "ALSO_VIEWED"
    assert res.json()["metadata"]["item_id"] == "1234567"


async def test_also_bought(client, item_service):
    res = await client.get("/item/1234567/alsobought")
    assert res.status_code == 200
    assert item_service.calls[0][0] == "find_also_bought_items_for_item"
    assert item_service.calls[0][1][3] is ApiKind.ALSO_BOUGHT
    assert res.json()["metadata"]["api"] == "ALSO_BOUGHT"


async def test_empty_item_id_rejected(client, item_service):
    res = await client.get("/item//alsoviewed")
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "INVALID_CONTEXT_ID"
    assert error["category"] == "validation"
    assert error["context"]["field"] == "item"
    assert item_service.calls == []


async def test_dot_segment_item_id_rejected(client, item_service):
    res = await client.get("/item/%2E%2E/alsoviewed")
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "INVALID_CONTEXT_ID"
    assert error["context"]["value"] == ".."
    assert item_service.calls == []


async def test_item_service_error_maps_to_502(client, item_service):
    item_service.results["find_also_bought_items_for_item"] = ItemServiceError(
        "status 500", status_code=500,
    )
    res = await client.get("/item/1234567/alsobought")
    assert res.status_code == 502
    error = res.json()["error"]
    assert error["code"] == "ITEM_SERVICE_ERROR"
    assert error["category"] == "external_api"


async def test_item_service_unavailable_maps_to_503(client, item_service):
    item_service.results["find_also_viewed_items_for_item"] = (
        ItemServiceUnavailableError("timeout")
    )
    res = await client.get("/item/1234567/alsoviewed")
    assert res.status_code == 503
    assert res.json()["error"]["code"] == "ITEM_SERVICE_UNAVAILABLE"


async def test_post_not_allowed(client):
    res = await client.post("/item/1234567/alsoviewed")
    assert res.status_code == 405
