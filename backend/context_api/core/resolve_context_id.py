"""Context Id Resolution — merges the path context id with the context cookie."""

from context_api.core.domain_types import (
    COOKIE_NULL_MARKER, COOKIE_PATH_VARIABLE, ContextId,
)


def resolve_context_id(
    path_context_id: str | None, cookie_context_id: str | None = None,
) -> ContextId:
    """Pick the effective context id for a request.

    The cookie wins only when the path says "current" and the cookie holds a
    real value; in every other case the path value is returned unchanged.
    """
    if (
        path_context_id == COOKIE_PATH_VARIABLE
        and cookie_context_id is not None
        and cookie_context_id != COOKIE_NULL_MARKER
    ):
        return ContextId(cookie_context_id)
    return ContextId(path_context_id)
