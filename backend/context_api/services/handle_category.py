"""Category Handlers — most popular items, for one category or for all of them.

Invariants:
    - Category id validated before the item service is called
    - "All categories" always looks up CATEGORY_ID_FOR_ALL, whatever the request holds
    - Item service and response builder errors propagate unchanged
"""

import logging

from context_api.core.domain_types import (
    CATEGORY_ID_FOR_ALL, ApiKind, CategoryId, IdentifierField, ProductInfo,
)
from context_api.core.service_protocols import (
    IdentifierValidator, ItemService, ResponseBuilder,
)
from context_api.core.validate_identifier import require_valid_identifier
from context_api.schemas.item import Item
from context_api.schemas.paging import PagingAndSorting
from context_api.schemas.response import ContextResponse

logger = logging.getLogger(__name__)


class CategoryHandlers:
    """Most Popular API."""

    def __init__(
        self,
        item_service: ItemService,
        response_builder: ResponseBuilder,
        validator: IdentifierValidator,
    ):
        self._items = item_service
        self._responses = response_builder
        self._validator = validator

    async def most_popular_for_all_categories(
        self, page_sort: PagingAndSorting, product_info: ProductInfo,
    ) -> ContextResponse[Item]:
        logger.info(
            f"Category Id = {CATEGORY_ID_FOR_ALL}",
            extra={
                "api": ApiKind.MOST_POPULAR.value,
                "identifier": CATEGORY_ID_FOR_ALL,
            },
        )
        return await self._most_popular(
            page_sort, CATEGORY_ID_FOR_ALL, product_info,
        )

    async def most_popular_for_category(
        self, page_sort: PagingAndSorting, category_id: str | None,
        product_info: ProductInfo,
    ) -> ContextResponse[Item]:
        logger.info(
            f"Category Id = {category_id}",
            extra={
                "api": ApiKind.MOST_POPULAR.value, "identifier": category_id,
            },
        )
        return await self._most_popular(page_sort, category_id, product_info)

    async def _most_popular(
        self, page_sort: PagingAndSorting, category_id: str | None,
        product_info: ProductInfo,
    ) -> ContextResponse[Item]:
        category_id = CategoryId(require_valid_identifier(
            self._validator, category_id, IdentifierField.CATEGORY,
        ))
        page = await self._items.find_most_popular_items_for_category(
            page_sort, category_id, product_info,
        )
        return self._responses.build_most_popular(page, category_id, page_sort)
