"""Context Handlers — recently viewed and recommended items for a browsing context.

Invariants:
    - Path id "current" plus a real context cookie → cookie value is used
    - Effective context id validated before the item service is called
    - Item service and response builder errors propagate unchanged
"""

import logging

from context_api.core.domain_types import (
    ApiKind, ContextId, IdentifierField, ProductInfo,
)
from context_api.core.resolve_context_id import resolve_context_id
from context_api.core.service_protocols import (
    IdentifierValidator, ItemService, ResponseBuilder,
)
from context_api.core.validate_identifier import require_valid_identifier
from context_api.schemas.item import Item
from context_api.schemas.paging import PagingAndSorting
from context_api.schemas.response import ContextResponse

logger = logging.getLogger(__name__)


class ContextHandlers:
    """Recently Viewed and Recommended Items APIs."""

    def __init__(
        self,
        item_service: ItemService,
        response_builder: ResponseBuilder,
        validator: IdentifierValidator,
    ):
        self._items = item_service
        self._responses = response_builder
        self._validator = validator

    async def recently_viewed(
        self, page_sort: PagingAndSorting, path_context_id: str | None,
        cookie_context_id: str | None, product_info: ProductInfo,
    ) -> ContextResponse[Item]:
        context_id = self._effective_context_id(
            path_context_id, cookie_context_id, ApiKind.RECENTLY_VIEWED,
        )
        page = await self._items.find_recently_viewed_items_for_context_id(
            page_sort, context_id, product_info,
        )
        return self._responses.build_recently_viewed(page, context_id, page_sort)

    async def recommended(
        self, page_sort: PagingAndSorting, path_context_id: str | None,
        cookie_context_id: str | None, product_info: ProductInfo,
    ) -> ContextResponse[Item]:
        context_id = self._effective_context_id(
            path_context_id, cookie_context_id, ApiKind.RECOMMENDED,
        )
        page = await self._items.find_recommended_items_for_context_id(
            page_sort, context_id, product_info,
        )
        return self._responses.build_recommended_items(
            page, context_id, page_sort,
        )

    def _effective_context_id(
        self, path_context_id: str | None, cookie_context_id: str | None,
        api_kind: ApiKind,
    ) -> ContextId:
        logger.info(
            f"Getting context_id from URL - context_id = {path_context_id}",
            extra={"api": api_kind.value, "identifier": path_context_id},
        )
        context_id = resolve_context_id(path_context_id, cookie_context_id)
        require_valid_identifier(
            self._validator, context_id, IdentifierField.CONTEXT,
        )
        return context_id
