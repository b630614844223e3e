"""Context Routes — Recently Viewed and Recommended Items APIs.

Invariants:
    - Path id "current" defers to the context_id cookie when it is set
    - Missing cookie arrives as "null" (the cookie default)
"""

from fastapi import APIRouter, Cookie, Depends

from context_api.api.dependencies import (
    get_context_handlers, paging_and_sorting, product_info_param,
)
from context_api.core.domain_types import (
    CONTEXT_COOKIE_NAME, COOKIE_NULL_MARKER, ProductInfo,
)
from context_api.schemas.item import Item
from context_api.schemas.paging import PagingAndSorting
from context_api.schemas.response import ContextResponse
from context_api.services.handle_context import ContextHandlers

router = APIRouter(prefix="/context", tags=["context"])


@router.get(
    "/{path_context_id:path}/items/viewed",
    response_model=ContextResponse[Item],
)
async def get_recent_items_for_context(
    path_context_id: str,
    cookie_context_id: str = Cookie(
        COOKIE_NULL_MARKER, alias=CONTEXT_COOKIE_NAME,
    ),
    page_sort: PagingAndSorting = Depends(paging_and_sorting),
    product_info: ProductInfo = Depends(product_info_param),
    handlers: ContextHandlers = Depends(get_context_handlers),
):
    """Items recently viewed in a browsing context."""
    return await handlers.recently_viewed(
        page_sort, path_context_id, cookie_context_id, product_info,
    )


@router.get(
    "/{path_context_id:path}/items/recommended",
    response_model=ContextResponse[Item],
)
async def get_recommended_items_for_context(
    path_context_id: str,
    cookie_context_id: str = Cookie(
        COOKIE_NULL_MARKER, alias=CONTEXT_COOKIE_NAME,
    ),
    page_sort: PagingAndSorting = Depends(paging_and_sorting),
    product_info: ProductInfo = Depends(product_info_param),
    handlers: ContextHandlers = Depends(get_context_handlers),
):
    """Items recommended for a browsing context."""
    return await handlers.recommended(
        page_sort, path_context_id, cookie_context_id, product_info,
    )
