"""Category Handlers — most popular, all categories and one category.

Tests:
    - One-category lookup receives (page_sort, id, product_info)
    - All-categories lookup always receives "ALL"
    - Invalid ids raise InvalidIdentifierError with no lookup
    - Service failures propagate unchanged
"""

import pytest

from context_api.core.domain_types import ApiKind, ProductInfo
from context_api.core.errors import InvalidIdentifierError, ItemServiceError
from context_api.schemas.paging import PagingAndSorting
from context_api.services.handle_category import CategoryHandlers
from tests.fakes import make_page


@pytest.fixture
def handlers(item_service, response_builder, validator):
    return CategoryHandlers(item_service, response_builder, validator)


async def test_most_popular_for_category_delegates(handlers, item_service, response_builder):
    page_sort = PagingAndSorting(page=2, page_size=5)
    page = make_page("1001", "1002", total=12, page=2, page_size=5)
    item_service.results["find_most_popular_items_for_category"] = page

    response = await handlers.most_popular_for_category(
        page_sort, "12345", ProductInfo.MINIMAL,
    )

    assert item_service.calls == [(
        "find_most_popular_items_for_category",
        (page_sort, "12345", ProductInfo.MINIMAL),
    )]
    assert response_builder.calls == [
        ("build_most_popular", (page, "12345", page_sort)),
    ]
    assert response.metadata.api is ApiKind.MOST_POPULAR
    assert response.metadata.category_id == "12345"
    assert [i.sku for i in response.results] == ["1001", "1002"]


async def test_all_categories_uses_sentinel(handlers, item_service):
    await handlers.most_popular_for_all_categories(
        PagingAndSorting(), ProductInfo.INTERMEDIATE,
    )
    method, args = item_service.calls[0]
    assert method == "find_most_popular_items_for_category"
    assert args[1] == "ALL"
    assert args[2] is ProductInfo.INTERMEDIATE


@pytest.mark.parametrize("category_id", [None, "", "  ", "abc 123", "../etc"])
async def test_invalid_category_never_reaches_service(
    handlers, item_service, response_builder, category_id,
):
    with pytest.raises(InvalidIdentifierError) as exc_info:
        await handlers.most_popular_for_category(
            PagingAndSorting(), category_id, ProductInfo.MINIMAL,
        )
    assert exc_info.value.field.value == "category"
    assert item_service.calls == []
    assert response_builder.calls == []


async def test_service_failure_propagates(handlers, item_service, response_builder):
    failure = ItemServiceError("status 500", status_code=500)
    item_service.results["find_most_popular_items_for_category"] = failure

    with pytest.raises(ItemServiceError) as exc_info:
        await handlers.most_popular_for_category(
            PagingAndSorting(), "12345", ProductInfo.MINIMAL,
        )
    assert exc_info.value is failure
    assert response_builder.calls == []


async def test_repeated_requests_make_identical_calls(handlers, item_service):
    page_sort = PagingAndSorting(page=1, page_size=10, sort_by="rank")
    for _ in range(3):
        await handlers.most_popular_for_category(
            page_sort, "12345", ProductInfo.MINIMAL,
        )
    assert len(item_service.calls) == 3
    first = item_service.calls[0]
    assert all(call == first for call in item_service.calls)
