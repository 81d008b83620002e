"""Declarative catalogue of the API endpoints exposed by the client.

Each entry names an operation, the HTTP action it performs, a path template
relative to the current (v3) or legacy (v2) base path, and the resource kind
its response maps to. ``BigcommerceClient.call`` is the only consumer.
"""

from dataclasses import dataclass
from enum import Enum
from string import Formatter

from .resources import ResourceKind as K


class Action(str, Enum):
    """What a dispatch does with the path and what it returns."""

    COLLECTION = "collection"  # GET, paginated unless legacy -> list[Resource]
    RESOURCE = "resource"  # GET -> Resource
    FIRST = "first"  # GET a filtered collection -> first Resource or None
    COUNT = "count"  # GET -> int
    CREATE = "create"  # POST body -> Resource
    UPDATE = "update"  # PUT body -> Resource
    DELETE = "delete"  # DELETE -> None
    RAW_PUT = "raw_put"  # PUT body -> decoded JSON


@dataclass(frozen=True)
class Endpoint:
    name: str
    action: Action
    path: str
    kind: K = K.RESOURCE
    legacy: bool = False
    filterable: bool = False  # accepts a filter whatever the action

    @property
    def path_params(self) -> tuple:
        """Placeholders in the path template, in order."""
        return tuple(field for _, field, _, _ in Formatter().parse(self.path) if field)

    @property
    def takes_body(self) -> bool:
        return self.action in (Action.CREATE, Action.UPDATE, Action.RAW_PUT)

    @property
    def takes_filter(self) -> bool:
        return self.filterable or self.action in (Action.COLLECTION, Action.COUNT, Action.FIRST)


def _crud(plural: str, singular: str, path: str, id_param: str, kind: K, legacy: bool = False,
          delete_all: bool = False, count: bool = False) -> list:
    """Standard list/get/create/update/delete endpoints of one resource."""
    item = f"{path}/{{{id_param}}}"
    endpoints = [
        Endpoint(f"get_{plural}", Action.COLLECTION, path, kind, legacy),
        Endpoint(f"get_{singular}", Action.RESOURCE, item, kind, legacy),
        Endpoint(f"create_{singular}", Action.CREATE, path, kind, legacy),
        Endpoint(f"update_{singular}", Action.UPDATE, item, kind, legacy),
        Endpoint(f"delete_{singular}", Action.DELETE, item, kind, legacy),
    ]
    if delete_all:
        endpoints.append(Endpoint(f"delete_all_{plural}", Action.DELETE, path, kind, legacy))
    if count:
        endpoints.append(Endpoint(f"get_{plural}_count", Action.COUNT, f"{path}/count", kind, legacy))
    return endpoints


ENDPOINTS = (
    # Pricelists
    *_crud("pricelists", "pricelist", "/pricelists", "pricelist_id", K.PRICELIST),
    Endpoint("get_all_pricelist_records", Action.COLLECTION, "/pricelists/{pricelist_id}/records",
             K.PRICELIST_RECORD),

    # Products
    *_crud("products", "product", "/catalog/products", "product_id", K.PRODUCT, delete_all=True),
    Endpoint("get_products_count", Action.COUNT, "/products/count", legacy=True),
    *_crud("product_images", "product_image", "/catalog/products/{product_id}/images", "image_id",
           K.PRODUCT_IMAGE),
    *_crud("product_custom_fields", "product_custom_field", "/catalog/products/{product_id}/custom-fields",
           "custom_field_id", K.PRODUCT_CUSTOM_FIELD),
    *_crud("product_variants", "product_variant", "/catalog/products/{product_id}/variants", "variant_id",
           K.PRODUCT_VARIANT),
    *_crud("product_options", "product_option", "/catalog/products/{product_id}/options", "option_id",
           K.PRODUCT_OPTION),
    Endpoint("create_product_option_value", Action.CREATE,
             "/catalog/products/{product_id}/options/{option_id}/values", K.OPTION_VALUE),
    Endpoint("update_product_option_value", Action.UPDATE,
             "/catalog/products/{product_id}/options/{option_id}/values/{option_value_id}", K.OPTION_VALUE),
    Endpoint("get_product_reviews", Action.COLLECTION, "/catalog/products/{product_id}/reviews",
             K.PRODUCT_REVIEW),
    Endpoint("create_product_review", Action.CREATE, "/catalog/products/{product_id}/reviews",
             K.PRODUCT_REVIEW),
    Endpoint("create_product_bulk_pricing_rules", Action.CREATE, "/products/{product_id}/discount_rules",
             legacy=True),
    Endpoint("get_google_product_search", Action.RESOURCE, "/products/{product_id}/googleproductsearch",
             legacy=True),

    # Skus and rules
    Endpoint("get_skus", Action.COLLECTION, "/products/skus", K.SKU, legacy=True),
    Endpoint("get_skus_count", Action.COUNT, "/products/skus/count", legacy=True),
    Endpoint("get_skus_by_product", Action.COLLECTION, "/products/{product_id}/skus", K.SKU, legacy=True),
    Endpoint("create_sku", Action.CREATE, "/products/{product_id}/skus", K.SKU, legacy=True),
    Endpoint("update_sku", Action.UPDATE, "/products/skus/{sku_id}", K.SKU, legacy=True),
    Endpoint("get_rules_by_product", Action.COLLECTION, "/products/{product_id}/rules", K.RULE, legacy=True),
    Endpoint("get_product_rule", Action.RESOURCE, "/products/{product_id}/rules/{rule_id}", K.RULE,
             legacy=True),
    Endpoint("create_product_rule", Action.CREATE, "/products/{product_id}/rules", K.RULE, legacy=True),

    # Categories and brands
    *_crud("categories", "category", "/catalog/categories", "category_id", K.CATEGORY, delete_all=True),
    Endpoint("get_categories_count", Action.COUNT, "/categories/count", legacy=True),
    *_crud("brands", "brand", "/catalog/brands", "brand_id", K.BRAND, delete_all=True),
    Endpoint("get_brands_count", Action.COUNT, "/brands/count", legacy=True),

    # Customers
    Endpoint("get_customers", Action.COLLECTION, "/customers", K.CUSTOMER),
    Endpoint("get_customers_count", Action.COUNT, "/customers/count", legacy=True),
    Endpoint("get_customer", Action.FIRST, "/customers?id:in={customer_id}", K.CUSTOMER),
    Endpoint("create_customer", Action.CREATE, "/customers", K.CUSTOMER),
    Endpoint("delete_customer", Action.DELETE, "/customers?id:in={customer_id}", K.CUSTOMER),
    Endpoint("get_customer_attributes", Action.COLLECTION, "/customers/attributes", K.CUSTOMER_ATTRIBUTE),
    Endpoint("create_customer_attribute", Action.CREATE, "/customers/attributes", K.CUSTOMER_ATTRIBUTE),
    Endpoint("get_customer_addresses", Action.COLLECTION, "/customers/addresses?customer_id:in={customer_id}",
             K.CUSTOMER_ADDRESS),
    Endpoint("create_customer_address", Action.CREATE, "/customers/{customer_id}/addresses", K.ADDRESS,
             legacy=True),
    *_crud("customer_groups", "customer_group", "/customer_groups", "customer_group_id", K.CUSTOMER_GROUP,
           legacy=True),

    # Inventory locations
    Endpoint("get_locations", Action.COLLECTION, "/inventory/locations", K.LOCATION),
    Endpoint("get_location", Action.RESOURCE, "/inventory/locations/{location_id}", K.LOCATION),
    Endpoint("create_location", Action.CREATE, "/inventory/locations", K.LOCATION),
    Endpoint("update_location", Action.UPDATE, "/inventory/locations/{location_id}", K.LOCATION),
    Endpoint("delete_location", Action.DELETE, "/inventory/locations/{location_id}", K.LOCATION),

    # Orders
    *_crud("orders", "order", "/orders", "order_id", K.ORDER, legacy=True, delete_all=True, count=True),
    Endpoint("get_order_statuses_with_counts", Action.RESOURCE, "/orders/count", K.ORDER_STATUS, legacy=True,
             filterable=True),
    Endpoint("get_order_products", Action.COLLECTION, "/orders/{order_id}/products", K.ORDER_PRODUCT,
             legacy=True),
    Endpoint("get_order_products_count", Action.COUNT, "/orders/{order_id}/products/count", legacy=True),
    Endpoint("get_order_coupons", Action.COLLECTION, "/orders/{order_id}/coupons", K.ORDER_COUPON,
             legacy=True),
    Endpoint("get_order_shipping_addresses", Action.COLLECTION, "/orders/{order_id}/shipping_addresses",
             K.ADDRESS, legacy=True),
    Endpoint("get_order_shipping_address", Action.RESOURCE,
             "/orders/{order_id}/shipping_addresses/{address_id}", K.ADDRESS, legacy=True),
    Endpoint("get_order_statuses", Action.COLLECTION, "/order_statuses", K.ORDER_STATUS, legacy=True),
    Endpoint("get_order_status", Action.RESOURCE, "/order_statuses/{status_id}", K.ORDER_STATUS, legacy=True),
    *_crud("shipments", "shipment", "/orders/{order_id}/shipments", "shipment_id", K.SHIPMENT, legacy=True),
    Endpoint("delete_all_shipments_for_order", Action.DELETE, "/orders/{order_id}/shipments", K.SHIPMENT,
             legacy=True),

    # Options and option sets
    *_crud("options", "option", "/options", "option_id", K.OPTION, legacy=True, delete_all=True, count=True),
    Endpoint("get_option_values", Action.COLLECTION, "/options/values", K.OPTION_VALUE, legacy=True),
    Endpoint("get_option_values_by_option", Action.COLLECTION, "/options/{option_id}/values", K.OPTION_VALUE,
             legacy=True),
    Endpoint("get_option_value", Action.RESOURCE, "/options/{option_id}/values/{option_value_id}",
             K.OPTION_VALUE, legacy=True),
    Endpoint("create_option_value", Action.CREATE, "/options/{option_id}/values", K.OPTION_VALUE, legacy=True),
    Endpoint("update_option_value", Action.UPDATE, "/options/{option_id}/values/{option_value_id}",
             K.OPTION_VALUE, legacy=True),
    Endpoint("delete_option_value", Action.DELETE, "/options/{option_id}/values/{option_value_id}",
             K.OPTION_VALUE, legacy=True),
    *_crud("option_sets", "option_set", "/optionsets", "option_set_id", K.OPTION_SET, legacy=True,
           delete_all=True, count=True),
    Endpoint("create_option_set_option", Action.CREATE, "/optionsets/{option_set_id}/options", legacy=True),

    # Marketing
    *_crud("coupons", "coupon", "/coupons", "coupon_id", K.COUPON, legacy=True, delete_all=True, count=True),
    *_crud("gift_certificates", "gift_certificate", "/gift_certificates", "gift_certificate_id",
           K.GIFT_CERTIFICATE, legacy=True, delete_all=True),
    *_crud("marketing_banners", "marketing_banner", "/banners", "banner_id", K.BANNER, legacy=True,
           delete_all=True),

    # Store settings and content
    *_crud("currencies", "currency", "/currencies", "currency_id", K.CURRENCY, legacy=True),
    *_crud("pages", "page", "/pages", "page_id", K.PAGE, legacy=True),
    Endpoint("get_request_logs", Action.COLLECTION, "/requestlogs", K.REQUEST_LOG, legacy=True),
    Endpoint("get_widgets", Action.COLLECTION, "/content/widgets", K.WIDGET),
    Endpoint("get_widget", Action.RESOURCE, "/content/widgets/{widget_uuid}", K.WIDGET),

    # Webhooks
    *_crud("webhooks", "webhook", "/hooks", "webhook_id", K.WEBHOOK),

    # Shipping
    Endpoint("get_shipping_zones", Action.COLLECTION, "/shipping/zones", K.SHIPPING_ZONE, legacy=True),
    Endpoint("get_shipping_zone", Action.RESOURCE, "/shipping/zones/{zone_id}", K.SHIPPING_ZONE, legacy=True),
    Endpoint("delete_shipping_zone", Action.DELETE, "/shipping/zones/{zone_id}", K.SHIPPING_ZONE, legacy=True),
    Endpoint("get_shipping_methods", Action.COLLECTION, "/shipping/zones/{zone_id}/methods", K.SHIPPING_METHOD,
             legacy=True),
    Endpoint("get_shipping_method", Action.RESOURCE, "/shipping/zones/{zone_id}/methods/{method_id}",
             K.SHIPPING_METHOD, legacy=True),
    Endpoint("delete_shipping_method", Action.DELETE, "/shipping/zones/{zone_id}/methods/{method_id}",
             K.SHIPPING_METHOD, legacy=True),

    # Carts
    Endpoint("create_cart", Action.CREATE, "/carts", K.CART),
    Endpoint("delete_cart", Action.DELETE, "/carts/{cart_id}", K.CART),
    Endpoint("add_cart_line_items", Action.CREATE, "/carts/{cart_id}/items", K.CART),
    Endpoint("update_cart_line_items", Action.UPDATE, "/carts/{cart_id}/items/{item_id}", K.CART),
    Endpoint("delete_cart_line_items", Action.DELETE, "/carts/{cart_id}/items/{item_id}", K.CART),

    # Relationship and bulk writes with fixed body shapes, see BigcommerceClient
    Endpoint("bulk_update_products", Action.RAW_PUT, "/catalog/products"),
    Endpoint("upsert_pricelist_records", Action.RAW_PUT, "/pricelists/{pricelist_id}/records"),
)

ENDPOINTS_BY_NAME = {endpoint.name: endpoint for endpoint in ENDPOINTS}


def get_endpoint(name: str) -> Endpoint:
    """Look up an endpoint by operation name."""
    try:
        return ENDPOINTS_BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown endpoint: {name}") from None
