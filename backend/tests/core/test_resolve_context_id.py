"""Context Id Resolution — cookie override truth table.

Tests:
    - "current" + real cookie → cookie value
    - "current" + "null" / missing cookie → "current" (path value)
    - any other path id ignores the cookie
"""

import pytest

from context_api.core.resolve_context_id import resolve_context_id


def test_current_with_cookie_uses_cookie():
    assert resolve_context_id("current", "abc123") == "abc123"


def test_current_with_null_marker_keeps_path():
    assert resolve_context_id("current", "null") == "current"


def test_current_without_cookie_keeps_path():
    assert resolve_context_id("current", None) == "current"
    assert resolve_context_id("current") == "current"


@pytest.mark.parametrize("cookie", ["abc123", "null", None])
def test_explicit_path_id_ignores_cookie(cookie):
    assert resolve_context_id("ctx-42", cookie) == "ctx-42"


def test_sentinel_match_is_case_sensitive():
    assert resolve_context_id("CURRENT", "abc123") == "CURRENT"


def test_empty_path_is_returned_unchanged():
    assert resolve_context_id("", "abc123") == ""
