"""Unit tests for query filters."""

from bigcommerce_api.filters import Filter


def test_empty_filter_renders_nothing():
    assert Filter().to_query() == ""
    assert Filter.create(None).to_query() == ""


def test_insertion_order_is_kept():
    query = Filter({"limit": 50, "page": 2, "name": "Blue Shirt"}).to_query()
    assert query == "?limit=50&page=2&name=Blue%20Shirt"


def test_unknown_keys_pass_through_verbatim():
    assert Filter({"id:in": [1, 2, 3]}).to_query() == "?id:in=1,2,3"


def test_booleans_and_none():
    assert Filter({"is_visible": True, "is_featured": False, "sku": None}).to_query() == (
        "?is_visible=true&is_featured=false"
    )


def test_create_returns_existing_filter():
    existing = Filter({"page": 1})
    assert Filter.create(existing) is existing


def test_item_assignment():
    query_filter = Filter()
    query_filter["status_id"] = 11
    assert query_filter["status_id"] == 11
    assert query_filter.to_query() == "?status_id=11"
