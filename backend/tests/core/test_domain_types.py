"""Domain Types — enum members and request constants."""

from context_api.core.domain_types import (
    CATEGORY_ID_FOR_ALL, CONTEXT_COOKIE_NAME, COOKIE_NULL_MARKER,
    COOKIE_PATH_VARIABLE, PROD_INFO_DEFAULT, PROD_INFO_PARAM,
    ApiKind, CategoryId, ProductInfo,
)


def test_identity_types_wrap_str():
    assert CategoryId("12345") == "12345"


def test_product_info_is_closed_set_with_minimal_default():
    assert {p.value for p in ProductInfo} == {"minimal", "intermediate"}
    assert PROD_INFO_DEFAULT is ProductInfo.MINIMAL
    assert PROD_INFO_PARAM == "productInfo"


def test_api_kind_has_five_apis():
    assert len(ApiKind) == 5
    assert ApiKind.ALSO_VIEWED.value == "ALSO_VIEWED"
    assert ApiKind.ALSO_BOUGHT.value == "ALSO_BOUGHT"


def test_request_constants():
    assert CATEGORY_ID_FOR_ALL == "ALL"
    assert CONTEXT_COOKIE_NAME == "context_id"
    assert COOKIE_NULL_MARKER == "null"
    assert COOKIE_PATH_VARIABLE == "current"
