"""Paging & Sorting — request-scoped page specification passed through to collaborators.

Invariants:
    - page is 1-based; page_size bounded by MAX_PAGE_SIZE
    - Immutable once built (frozen): handlers pass it through unmodified
"""

from pydantic import BaseModel, ConfigDict, Field

from context_api.core.domain_types import (
    DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, SortOrder,
)


class PagingAndSorting(BaseModel):
    """Page number/size and sort order parsed from query parameters."""
    model_config = ConfigDict(frozen=True)

    page: int = Field(DEFAULT_PAGE, ge=1)
    page_size: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    sort_by: str | None = Field(None, max_length=64)
    sort_order: SortOrder = SortOrder.DESC

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size
