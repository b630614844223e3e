"""Domain Types — identifier types, enums and request constants.

Invariants:
    - CategoryId, ContextId, ItemId wrap str: identifiers are opaque tokens
    - ProductInfo and ApiKind are closed sets: no raw string matching
    - Request constants (cookie name, sentinels) defined once, here

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and query strings without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CategoryId = NewType("CategoryId", str)
ContextId = NewType("ContextId", str)
ItemId = NewType("ItemId", str)


# ─── Enums ───────────────────────────────────────────────────────

class ProductInfo(str, Enum):
    """Per-item detail level included in the response."""
    MINIMAL = "minimal"
    INTERMEDIATE = "intermediate"


class ApiKind(str, Enum):
    """Which recommendation API a response answers."""
    MOST_POPULAR = "MOST_POPULAR"
    RECENTLY_VIEWED = "RECENTLY_VIEWED"
    RECOMMENDED = "RECOMMENDED"
    ALSO_VIEWED = "ALSO_VIEWED"
    ALSO_BOUGHT = "ALSO_BOUGHT"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class IdentifierField(str, Enum):
    """Which identifier a request carries: used in error messages and metadata."""
    CATEGORY = "category"
    CONTEXT = "context"
    ITEM = "item"


# ─── Request Constants ───────────────────────────────────────────

CATEGORY_ID_FOR_ALL = CategoryId("ALL")

PROD_INFO_PARAM = "productInfo"
PROD_INFO_DEFAULT = ProductInfo.MINIMAL

CONTEXT_COOKIE_NAME = "context_id"
# Spring-style cookie default: an absent cookie arrives as the string "null"
COOKIE_NULL_MARKER = "null"
# Path token meaning "take the context id from the cookie"
COOKIE_PATH_VARIABLE = "current"

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
