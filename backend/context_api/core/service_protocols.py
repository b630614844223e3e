"""Collaborator Protocols — contracts between the handlers and the services they call.

Invariants:
    - Handlers depend only on these Protocols, never on concrete classes
    - ItemService methods are async (implementations do IO);
      ResponseBuilder and IdentifierValidator are pure and sync
    - Implementations are created once at startup and shared across requests,
      so they must be safe to call concurrently

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no base class
"""

from typing import Protocol

from context_api.core.domain_types import (
    ApiKind, CategoryId, ContextId, ItemId, ProductInfo,
)
from context_api.schemas.item import Item, Page
from context_api.schemas.paging import PagingAndSorting
from context_api.schemas.response import ContextResponse


class IdentifierValidator(Protocol):
    """Accepts or rejects an identifier before any lookup."""
    def is_valid(self, identifier: str | None) -> bool: ...


class ItemService(Protocol):
    """Recommendation lookups: raise ServiceFailureError on backend failure."""
    async def find_most_popular_items_for_category(
        self, page_sort: PagingAndSorting, category_id: CategoryId,
        product_info: ProductInfo,
    ) -> Page[Item]: ...

    async def find_recently_viewed_items_for_context_id(
        self, page_sort: PagingAndSorting, context_id: ContextId,
        product_info: ProductInfo,
    ) -> Page[Item]: ...

    async def find_recommended_items_for_context_id(
        self, page_sort: PagingAndSorting, context_id: ContextId,
        product_info: ProductInfo,
    ) -> Page[Item]: ...

    async def find_also_viewed_items_for_item(
        self, page_sort: PagingAndSorting, item_id: ItemId,
        product_info: ProductInfo, api_kind: ApiKind,
    ) -> Page[Item]: ...

    async def find_also_bought_items_for_item(
        self, page_sort: PagingAndSorting, item_id: ItemId,
        product_info: ProductInfo, api_kind: ApiKind,
    ) -> Page[Item]: ...

    async def health_check(self) -> bool: ...


class ResponseBuilder(Protocol):
    """Shapes a Page into the API response envelope."""
    def build_most_popular(
        self, page: Page[Item], category_id: CategoryId,
        page_sort: PagingAndSorting,
    ) -> ContextResponse[Item]: ...

    def build_recently_viewed(
        self, page: Page[Item], context_id: ContextId,
        page_sort: PagingAndSorting,
    ) -> ContextResponse[Item]: ...

    def build_recommended_items(
        self, page: Page[Item], context_id: ContextId,
        page_sort: PagingAndSorting,
    ) -> ContextResponse[Item]: ...

    def build_for_item(
        self, page: Page[Item], item_id: ItemId,
        page_sort: PagingAndSorting, api_kind: ApiKind,
    ) -> ContextResponse[Item]: ...
