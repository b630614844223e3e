"""Item Service Client — httpx client for the recommendation backend.

Invariants:
    - One request per lookup: no retries, no caching
    - Connection errors and timeouts → ItemServiceUnavailableError (503)
    - Non-2xx responses and unreadable bodies → ItemServiceError (502)
    - Ids are percent-encoded into a single path segment
    - Returned Page keeps the backend's item order and the request's page/page_size

Design Decisions:
    - Shared AsyncClient owned by the caller (app lifespan) or by this wrapper
      when none is given; close() only closes a client it created
"""

import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from context_api.core.domain_types import (
    PROD_INFO_PARAM, ApiKind, CategoryId, ContextId, ItemId, ProductInfo,
)
from context_api.core.errors import (
    ErrorContext, ItemServiceError, ItemServiceUnavailableError,
)
from context_api.schemas.item import Item, Page
from context_api.schemas.paging import PagingAndSorting

logger = logging.getLogger(__name__)


class ItemServiceClient:
    """ItemService backed by the recommendation backend's HTTP API."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 5.0,
        client: httpx.AsyncClient | None = None,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url, timeout=timeout_seconds,
        )

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # ─── Lookups ─────────────────────────────────────────────────

    async def find_most_popular_items_for_category(
        self, page_sort: PagingAndSorting, category_id: CategoryId,
        product_info: ProductInfo,
    ) -> Page[Item]:
        return await self._fetch_page(
            f"/categories/{_segment(category_id)}/items/popular",
            page_sort, product_info, ApiKind.MOST_POPULAR,
        )

    async def find_recently_viewed_items_for_context_id(
        self, page_sort: PagingAndSorting, context_id: ContextId,
        product_info: ProductInfo,
    ) -> Page[Item]:
        return await self._fetch_page(
            f"/contexts/{_segment(context_id)}/items/viewed",
            page_sort, product_info, ApiKind.RECENTLY_VIEWED,
        )

    async def find_recommended_items_for_context_id(
        self, page_sort: PagingAndSorting, context_id: ContextId,
        product_info: ProductInfo,
    ) -> Page[Item]:
        return await self._fetch_page(
            f"/contexts/{_segment(context_id)}/items/recommended",
            page_sort, product_info, ApiKind.RECOMMENDED,
        )

    async def find_also_viewed_items_for_item(
        self, page_sort: PagingAndSorting, item_id: ItemId,
        product_info: ProductInfo, api_kind: ApiKind,
    ) -> Page[Item]:
        return await self._fetch_page(
            f"/items/{_segment(item_id)}/alsoviewed",
            page_sort, product_info, api_kind, send_api=True,
        )

    async def find_also_bought_items_for_item(
        self, page_sort: PagingAndSorting, item_id: ItemId,
        product_info: ProductInfo, api_kind: ApiKind,
    ) -> Page[Item]:
        return await self._fetch_page(
            f"/items/{_segment(item_id)}/alsobought",
            page_sort, product_info, api_kind, send_api=True,
        )

    async def health_check(self) -> bool:
        try:
            response = await self._client.get("/health")
        except httpx.HTTPError as e:
            logger.warning(f"Item service health check failed: {e}")
            return False
        return response.is_success

    # ─── Helpers ─────────────────────────────────────────────────

    async def _fetch_page(
        self,
        path: str,
        page_sort: PagingAndSorting,
        product_info: ProductInfo,
        api_kind: ApiKind,
        send_api: bool = False,
    ) -> Page[Item]:
        params = _build_params(page_sort, product_info)
        if send_api:
            params["api"] = api_kind.value
        context = ErrorContext(api=api_kind.value)

        try:
            response = await self._client.get(path, params=params)
        except httpx.TimeoutException:
            raise ItemServiceUnavailableError(
                f"timeout calling {path}", context=context,
            )
        except httpx.TransportError as e:
            raise ItemServiceUnavailableError(
                f"{type(e).__name__} calling {path}", context=context,
            )

        if not response.is_success:
            logger.error(
                f"Item service returned {response.status_code} for {path}",
                extra={"api": api_kind.value, "path": path},
            )
            raise ItemServiceError(
                f"status {response.status_code} for {path}",
                status_code=response.status_code, context=context,
            )
        return _parse_page(response, page_sort, path, context)


def _segment(identifier: str) -> str:
    """Percent-encode an id as a single path segment ('/' and dot segments included)."""
    encoded = quote(identifier, safe="")
    if encoded in (".", ".."):
        return encoded.replace(".", "%2E")
    return encoded


def _build_params(
    page_sort: PagingAndSorting, product_info: ProductInfo,
) -> dict[str, str | int]:
    params: dict[str, str | int] = {
        "page": page_sort.page,
        "pageSize": page_sort.page_size,
        "sortOrder": page_sort.sort_order.value,
        PROD_INFO_PARAM: product_info.value,
    }
    if page_sort.sort_by:
        params["sortBy"] = page_sort.sort_by
    return params


def _parse_page(
    response: httpx.Response,
    page_sort: PagingAndSorting,
    path: str,
    context: ErrorContext,
) -> Page[Item]:
    """Backend body {"items": [...], "total": n} → Page[Item]."""
    try:
        body = response.json()
        raw_items = body.get("items", []) if isinstance(body, dict) else None
        if not isinstance(raw_items, list):
            raise ValueError("body has no items list")
        items = [Item.model_validate(raw) for raw in raw_items]
        return Page[Item](
            items=items,
            total=body.get("total", len(items)),
            page=page_sort.page,
            page_size=page_sort.page_size,
        )
    except (ValueError, ValidationError) as e:
        raise ItemServiceError(
            f"malformed body from {path}: {e}",
            status_code=response.status_code, context=context,
        )
