"""Context Response — the API response envelope for every recommendation endpoint.

Invariants:
    - Exactly one of category_id / context_id / item_id is set, matching the api
    - results preserve page order
    - pagination.count == len(results)
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from context_api.core.domain_types import ApiKind

T = TypeVar("T")


class Pagination(BaseModel):
    page: int
    page_size: int
    total: int
    total_pages: int
    count: int


class ResponseMetadata(BaseModel):
    """Which API answered, for which identifier, and where the page sits."""
    api: ApiKind
    category_id: str | None = None
    context_id: str | None = None
    item_id: str | None = None
    pagination: Pagination


class ContextResponse(BaseModel, Generic[T]):
    metadata: ResponseMetadata
    results: list[T] = Field(default_factory=list)
