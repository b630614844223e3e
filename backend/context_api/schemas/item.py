"""Item & Page — recommendation results returned by the item service.

Invariants:
    - Page.items keeps the order the item service returned
    - total >= 0; total_pages is 0 for an empty result set
"""

import math
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Item(BaseModel):
    """A recommended product. Detail fields are filled for productInfo=intermediate."""
    model_config = ConfigDict(extra="ignore")

    sku: str
    name: str | None = None
    url: str | None = None
    image_url: str | None = None
    regular_price: float | None = None
    sale_price: float | None = None
    customer_review_average: float | None = None
    customer_review_count: int | None = None


class Page(BaseModel, Generic[T]):
    """A bounded, ordered slice of results plus pagination metadata."""
    items: list[T] = Field(default_factory=list)
    total: int = Field(0, ge=0)
    page: int = Field(1, ge=1)
    page_size: int = Field(10, ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.total else 0
