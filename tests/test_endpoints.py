"""Unit tests for the endpoint table."""

import pytest

from bigcommerce_api.endpoints import ENDPOINTS, ENDPOINTS_BY_NAME, Action, get_endpoint
from bigcommerce_api.resources import RESOURCE_TYPES, ResourceKind


def test_names_are_unique():
    assert len(ENDPOINTS_BY_NAME) == len(ENDPOINTS)


def test_every_kind_is_mappable():
    assert all(endpoint.kind in RESOURCE_TYPES for endpoint in ENDPOINTS)


def test_path_params_in_order():
    endpoint = get_endpoint("update_product_option_value")
    assert endpoint.path_params == ("product_id", "option_id", "option_value_id")


def test_crud_family_is_generated():
    for name in ("get_brands", "get_brand", "create_brand", "update_brand", "delete_brand", "delete_all_brands"):
        assert ENDPOINTS_BY_NAME[name].kind == ResourceKind.BRAND


def test_orders_are_legacy():
    assert get_endpoint("get_orders").legacy
    assert get_endpoint("get_orders").action == Action.COLLECTION
    assert not get_endpoint("get_products").legacy


def test_body_and_filter_flags():
    assert get_endpoint("create_product").takes_body
    assert not get_endpoint("create_product").takes_filter
    assert get_endpoint("get_products_count").takes_filter
    assert not get_endpoint("delete_product").takes_body


def test_order_status_counts_are_filterable():
    endpoint = get_endpoint("get_order_statuses_with_counts")
    assert endpoint.action == Action.RESOURCE
    assert endpoint.takes_filter
    assert not get_endpoint("get_order").takes_filter


def test_unknown_endpoint():
    with pytest.raises(KeyError):
        get_endpoint("launch_rocket")
