"""Response Builder — wraps a Page of items into a ContextResponse.

Invariants:
    - Pure: no IO, no mutation of the page or paging parameters
    - Pagination page/page_size come from the request; total from the page
"""

import math

from context_api.core.domain_types import (
    ApiKind, CategoryId, ContextId, ItemId,
)
from context_api.schemas.item import Item, Page
from context_api.schemas.paging import PagingAndSorting
from context_api.schemas.response import (
    ContextResponse, Pagination, ResponseMetadata,
)


class ContextResponseBuilder:
    """Default ResponseBuilder."""

    def build_most_popular(
        self, page: Page[Item], category_id: CategoryId,
        page_sort: PagingAndSorting,
    ) -> ContextResponse[Item]:
        return self._build(
            page, page_sort, ApiKind.MOST_POPULAR, category_id=category_id,
        )

    def build_recently_viewed(
        self, page: Page[Item], context_id: ContextId,
        page_sort: PagingAndSorting,
    ) -> ContextResponse[Item]:
        return self._build(
            page, page_sort, ApiKind.RECENTLY_VIEWED, context_id=context_id,
        )

    def build_recommended_items(
        self, page: Page[Item], context_id: ContextId,
        page_sort: PagingAndSorting,
    ) -> ContextResponse[Item]:
        return self._build(
            page, page_sort, ApiKind.RECOMMENDED, context_id=context_id,
        )

    def build_for_item(
        self, page: Page[Item], item_id: ItemId,
        page_sort: PagingAndSorting, api_kind: ApiKind,
    ) -> ContextResponse[Item]:
        return self._build(page, page_sort, api_kind, item_id=item_id)

    def _build(
        self, page: Page[Item], page_sort: PagingAndSorting,
        api_kind: ApiKind, **identifier: str,
    ) -> ContextResponse[Item]:
        results = list(page.items)
        total_pages = (
            math.ceil(page.total / page_sort.page_size) if page.total else 0
        )
        return ContextResponse[Item](
            metadata=ResponseMetadata(
                api=api_kind,
                pagination=Pagination(
                    page=page_sort.page,
                    page_size=page_sort.page_size,
                    total=page.total,
                    total_pages=total_pages,
                    count=len(results),
                ),
                **identifier,
            ),
            results=results,
        )
