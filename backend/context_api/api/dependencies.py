"""Request Dependencies — paging/sorting params and handler lookup.

Invariants:
    - Collaborators live on app.state, set once by create_app / lifespan
    - Handlers built per request from those shared collaborators (no per-request IO)
"""

from fastapi import Depends, Query, Request

from context_api.core.domain_types import (
    DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, PROD_INFO_DEFAULT,
    PROD_INFO_PARAM, ProductInfo, SortOrder,
)
from context_api.core.service_protocols import (
    IdentifierValidator, ItemService, ResponseBuilder,
)
from context_api.schemas.paging import PagingAndSorting
from context_api.services.handle_category import CategoryHandlers
from context_api.services.handle_context import ContextHandlers
from context_api.services.handle_item import ItemHandlers


def paging_and_sorting(
    page: int = Query(DEFAULT_PAGE, ge=1, description="1-based page number"),
    page_size: int = Query(
        DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize",
        description="Number of items per page",
    ),
    sort_by: str | None = Query(
        None, alias="sortBy", max_length=64, description="Field to sort by",
    ),
    sort_order: SortOrder = Query(
        SortOrder.DESC, alias="sortOrder", description="'asc' or 'desc'",
    ),
) -> PagingAndSorting:
    return PagingAndSorting(
        page=page, page_size=page_size,
        sort_by=sort_by, sort_order=sort_order,
    )


def product_info_param(
    product_info: ProductInfo = Query(
        PROD_INFO_DEFAULT, alias=PROD_INFO_PARAM,
        description="Per-item detail: minimal or intermediate",
    ),
) -> ProductInfo:
    return product_info


Collaborators = tuple[ItemService, ResponseBuilder, IdentifierValidator]


def _collaborators(request: Request) -> Collaborators:
    state = request.app.state
    return state.item_service, state.response_builder, state.validator


def get_category_handlers(
    collaborators: Collaborators = Depends(_collaborators),
) -> CategoryHandlers:
    return CategoryHandlers(*collaborators)


def get_context_handlers(
    collaborators: Collaborators = Depends(_collaborators),
) -> ContextHandlers:
    return ContextHandlers(*collaborators)


def get_item_handlers(
    collaborators: Collaborators = Depends(_collaborators),
) -> ItemHandlers:
    return ItemHandlers(*collaborators)
