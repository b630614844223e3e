"""Category Routes — Most Popular API, all categories or one category.

Invariants:
    - GET /categories/items/popular always looks up the "ALL" category
    - {category_id:path} lets an empty segment reach validation (400, not 404)
"""

from fastapi import APIRouter, Depends

from context_api.api.dependencies import (
    get_category_handlers, paging_and_sorting, product_info_param,
)
from context_api.core.domain_types import ProductInfo
from context_api.schemas.item import Item
from context_api.schemas.paging import PagingAndSorting
from context_api.schemas.response import ContextResponse
from context_api.services.handle_category import CategoryHandlers

router = APIRouter(tags=["category"])


@router.get(
    "/categories/items/popular", response_model=ContextResponse[Item],
)
async def get_most_popular_items_for_all_categories(
    page_sort: PagingAndSorting = Depends(paging_and_sorting),
    product_info: ProductInfo = Depends(product_info_param),
    handlers: CategoryHandlers = Depends(get_category_handlers),
):
    """Most popular items across every category."""
    return await handlers.most_popular_for_all_categories(
        page_sort, product_info,
    )


@router.get(
    "/category/{category_id:path}/items/popular",
    response_model=ContextResponse[Item],
)
async def get_most_popular_items_for_category(
    category_id: str,
    page_sort: PagingAndSorting = Depends(paging_and_sorting),
    product_info: ProductInfo = Depends(product_info_param),
    handlers: CategoryHandlers = Depends(get_category_handlers),
):
    """Most popular items in one category."""
    return await handlers.most_popular_for_category(
        page_sort, category_id, product_info,
    )
