"""Item Handlers — customers also viewed / also bought for a single item.

Invariants:
    - Item id validated before the item service is called
    - api_kind passed to both the item service and the response builder
    - Item service and response builder errors propagate unchanged
"""

import logging

from context_api.core.domain_types import (
    ApiKind, IdentifierField, ItemId, ProductInfo,
)
from context_api.core.service_protocols import (
    IdentifierValidator, ItemService, ResponseBuilder,
)
from context_api.core.validate_identifier import require_valid_identifier
from context_api.schemas.item import Item
from context_api.schemas.paging import PagingAndSorting
from context_api.schemas.response import ContextResponse

logger = logging.getLogger(__name__)


class ItemHandlers:
    """Customer Also Viewed and Customer Also Bought APIs."""

    def __init__(
        self,
        item_service: ItemService,
        response_builder: ResponseBuilder,
        validator: IdentifierValidator,
    ):
        self._items = item_service
        self._responses = response_builder
        self._validator = validator

    async def also_viewed(
        self, page_sort: PagingAndSorting, item_id: str | None,
        product_info: ProductInfo,
    ) -> ContextResponse[Item]:
        item_id = self._valid_item_id(item_id, ApiKind.ALSO_VIEWED)
        page = await self._items.find_also_viewed_items_for_item(
            page_sort, item_id, product_info, ApiKind.ALSO_VIEWED,
        )
        return self._responses.build_for_item(
            page, item_id, page_sort, ApiKind.ALSO_VIEWED,
        )

    async def also_bought(
        self, page_sort: PagingAndSorting, item_id: str | None,
        product_info: ProductInfo,
    ) -> ContextResponse[Item]:
        item_id = self._valid_item_id(item_id, ApiKind.ALSO_BOUGHT)
        page = await self._items.find_also_bought_items_for_item(
            page_sort, item_id, product_info, ApiKind.ALSO_BOUGHT,
        )
        return self._responses.build_for_item(
            page, item_id, page_sort, ApiKind.ALSO_BOUGHT,
        )

    def _valid_item_id(self, item_id: str | None, api_kind: ApiKind) -> ItemId:
        logger.info(
            f"Getting item_id from URL - itemId = {item_id}",
            extra={"api": api_kind.value, "identifier": item_id},
        )
        return ItemId(require_valid_identifier(
            self._validator, item_id, IdentifierField.ITEM,
        ))
