"""Item Routes — Customer Also Viewed and Customer Also Bought APIs."""

from fastapi import APIRouter, Depends

from context_api.api.dependencies import (
    get_item_handlers, paging_and_sorting, product_info_param,
)
from context_api.core.domain_types import ProductInfo
from context_api.schemas.item import Item
from context_api.schemas.paging import PagingAndSorting
from context_api.schemas.response import ContextResponse
from context_api.services.handle_item import ItemHandlers

router = APIRouter(prefix="/item", tags=["item"])


@router.get(
    "/{item_id:path}/alsoviewed", response_model=ContextResponse[Item],
)
async def get_also_viewed_items_for_item(
    item_id: str,
    page_sort: PagingAndSorting = Depends(paging_and_sorting),
    product_info: ProductInfo = Depends(product_info_param),
    handlers: ItemHandlers = Depends(get_item_handlers),
):
    """Items customers also viewed after viewing this one."""
    return await handlers.also_viewed(page_sort, item_id, product_info)


@router.get(
    "/{item_id:path}/alsobought", response_model=ContextResponse[Item],
)
async def get_also_bought_items_for_item(
    item_id: str,
    page_sort: PagingAndSorting = Depends(paging_and_sorting),
    product_info: ProductInfo = Depends(product_info_param),
    handlers: ItemHandlers = Depends(get_item_handlers),
):
    """Items customers also bought with this one."""
    return await handlers.also_bought(page_sort, item_id, product_info)
