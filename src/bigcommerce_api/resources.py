"""Resource models returned by and sent to the API."""

from enum import Enum
from typing import ClassVar, Optional, Union

from pydantic import BaseModel, ConfigDict


class ResourceKind(str, Enum):
    """Resource types known to the mapper."""

    RESOURCE = "Resource"
    ADDRESS = "Address"
    BANNER = "Banner"
    BRAND = "Brand"
    CART = "Cart"
    CATEGORY = "Category"
    COUPON = "Coupon"
    CURRENCY = "Currency"
    CUSTOMER = "Customer"
    CUSTOMER_ADDRESS = "CustomerAddress"
    CUSTOMER_ATTRIBUTE = "CustomerAttribute"
    CUSTOMER_GROUP = "CustomerGroup"
    GIFT_CERTIFICATE = "GiftCertificate"
    LOCATION = "Location"
    OPTION = "Option"
    OPTION_SET = "OptionSet"
    OPTION_VALUE = "OptionValue"
    ORDER = "Order"
    ORDER_COUPON = "OrderCoupons"
    ORDER_PRODUCT = "OrderProduct"
    ORDER_STATUS = "OrderStatus"
    PAGE = "Page"
    PRICELIST = "Pricelist"
    PRICELIST_RECORD = "PricelistRecord"
    PRODUCT = "Product"
    PRODUCT_CUSTOM_FIELD = "ProductCustomField"
    PRODUCT_IMAGE = "ProductImage"
    PRODUCT_OPTION = "ProductOption"
    PRODUCT_REVIEW = "ProductReview"
    PRODUCT_VARIANT = "ProductVariant"
    REQUEST_LOG = "RequestLog"
    RULE = "Rule"
    SHIPMENT = "Shipment"
    SHIPPING_METHOD = "ShippingMethod"
    SHIPPING_ZONE = "ShippingZone"
    SKU = "Sku"
    STORE = "Store"
    WEBHOOK = "Webhook"
    WIDGET = "Widget"


class Resource(BaseModel):
    """A JSON object from the API; every field is available as an attribute.

    Subclasses name the fields that must not be sent back on create or
    update, and optionally the collection path used by ``client.create``,
    ``client.update`` and ``client.delete``. The path is a format string
    filled from the resource's own fields.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[Union[int, str]] = None

    ignore_on_create: ClassVar[frozenset] = frozenset()
    ignore_on_update: ClassVar[frozenset] = frozenset({"id"})
    collection_path: ClassVar[Optional[str]] = None
    legacy: ClassVar[bool] = False

    def to_dict(self) -> dict:
        """Fields present on this resource, as received or assigned."""
        extra = self.model_extra or {}
        return {k: v for k, v in self.model_dump().items() if k in extra or k in self.model_fields_set}

    def get_create_fields(self) -> dict:
        return {k: v for k, v in self.to_dict().items() if k not in self.ignore_on_create}

    def get_update_fields(self) -> dict:
        return {k: v for k, v in self.to_dict().items() if k not in self.ignore_on_update}

    def resource_path(self) -> Optional[str]:
        """Collection path with this resource's fields filled in."""
        if self.collection_path is None:
            return None
        return self.collection_path.format(**self.to_dict())


class Product(Resource):
    ignore_on_create = frozenset({"id", "date_created", "date_modified", "calculated_price", "base_variant_id"})
    ignore_on_update = frozenset({"id", "date_created", "date_modified", "calculated_price", "base_variant_id"})
    collection_path = "/catalog/products"


class ProductVariant(Resource):
    ignore_on_create = frozenset({"product_id"})
    ignore_on_update = frozenset({"id", "product_id"})
    collection_path = "/catalog/products/{product_id}/variants"


class ProductImage(Resource):
    ignore_on_create = frozenset({"id", "product_id", "date_modified"})
    ignore_on_update = frozenset({"id", "product_id", "date_modified"})
    collection_path = "/catalog/products/{product_id}/images"


class ProductCustomField(Resource):
    ignore_on_create = frozenset({"id", "product_id"})
    ignore_on_update = frozenset({"id", "product_id"})
    collection_path = "/catalog/products/{product_id}/custom-fields"


class ProductOption(Resource):
    ignore_on_create = frozenset({"id", "product_id"})
    ignore_on_update = frozenset({"id", "product_id"})
    collection_path = "/catalog/products/{product_id}/options"


class ProductReview(Resource):
    ignore_on_create = frozenset({"id", "product_id", "date_created", "date_modified"})
    ignore_on_update = frozenset({"id", "product_id", "date_created", "date_modified"})
    collection_path = "/catalog/products/{product_id}/reviews"


class Category(Resource):
    ignore_on_create = frozenset({"id", "parent_category_list"})
    ignore_on_update = frozenset({"id", "parent_category_list"})
    collection_path = "/catalog/categories"


class Brand(Resource):
    ignore_on_create = frozenset({"id"})
    collection_path = "/catalog/brands"


class Customer(Resource):
    ignore_on_create = frozenset({"id", "date_created", "date_modified"})
    ignore_on_update = frozenset({"date_created", "date_modified"})


class CustomerAttribute(Resource):
    ignore_on_create = frozenset({"id"})
    collection_path = "/customers/attributes"


class CustomerAddress(Resource):
    ignore_on_create = frozenset({"id"})


class CustomerGroup(Resource):
    ignore_on_create = frozenset({"id"})
    ignore_on_update = frozenset({"id", "date_created", "date_modified"})
    collection_path = "/customer_groups"
    legacy = True


class Location(Resource):
    ignore_on_create = frozenset({"id"})
    collection_path = "/inventory/locations"


class Pricelist(Resource):
    ignore_on_create = frozenset({"id", "date_created", "date_modified"})
    ignore_on_update = frozenset({"id", "date_created", "date_modified"})
    collection_path = "/pricelists"


class PricelistRecord(Resource):
    pass


class Order(Resource):
    ignore_on_create = frozenset({"id", "date_created", "date_modified", "date_shipped"})
    ignore_on_update = frozenset({
        "id",
        "customer_id",
        "date_created",
        "date_modified",
        "date_shipped",
        "status",
        "products",
        "shipping_addresses",
        "coupons",
    })
    collection_path = "/orders"
    legacy = True


class OrderProduct(Resource):
    legacy = True


class OrderCoupons(Resource):
    legacy = True


class OrderStatus(Resource):
    legacy = True


class Address(Resource):
    legacy = True


class Shipment(Resource):
    ignore_on_create = frozenset({"id", "order_id", "date_created", "customer_id", "shipping_method"})
    ignore_on_update = frozenset({
        "id",
        "order_id",
        "date_created",
        "customer_id",
        "shipping_method",
        "items",
    })
    collection_path = "/orders/{order_id}/shipments"
    legacy = True


class Option(Resource):
    ignore_on_create = frozenset({"id"})
    collection_path = "/options"
    legacy = True


class OptionValue(Resource):
    ignore_on_create = frozenset({"id", "option_id"})
    ignore_on_update = frozenset({"id", "option_id"})
    collection_path = "/options/{option_id}/values"
    legacy = True


class OptionSet(Resource):
    ignore_on_create = frozenset({"id"})
    collection_path = "/optionsets"
    legacy = True


class Coupon(Resource):
    ignore_on_create = frozenset({"id", "num_uses"})
    ignore_on_update = frozenset({"id", "num_uses"})
    collection_path = "/coupons"
    legacy = True


class Currency(Resource):
    ignore_on_create = frozenset({"id", "date_created", "date_modified"})
    ignore_on_update = frozenset({"id", "date_created", "date_modified"})
    collection_path = "/currencies"
    legacy = True


class Page(Resource):
    ignore_on_create = frozenset({"id"})
    collection_path = "/pages"
    legacy = True


class GiftCertificate(Resource):
    ignore_on_create = frozenset({"id"})
    collection_path = "/gift_certificates"
    legacy = True


class Banner(Resource):
    ignore_on_create = frozenset({"id", "date_created"})
    ignore_on_update = frozenset({"id", "date_created"})
    collection_path = "/banners"
    legacy = True


class Sku(Resource):
    ignore_on_create = frozenset({"id", "product_id"})
    ignore_on_update = frozenset({"id", "product_id"})
    collection_path = "/products/{product_id}/skus"
    legacy = True


class Rule(Resource):
    ignore_on_create = frozenset({"id", "product_id"})
    ignore_on_update = frozenset({"id", "product_id"})
    collection_path = "/products/{product_id}/rules"
    legacy = True


class ShippingZone(Resource):
    ignore_on_create = frozenset({"id"})
    collection_path = "/shipping/zones"
    legacy = True


class ShippingMethod(Resource):
    ignore_on_create = frozenset({"id"})
    legacy = True


class Webhook(Resource):
    ignore_on_create = frozenset({"id", "created_at", "updated_at"})
    ignore_on_update = frozenset({"id", "created_at", "updated_at"})
    collection_path = "/hooks"


class Widget(Resource):
    ignore_on_create = frozenset({"uuid", "date_created", "date_modified"})
    ignore_on_update = frozenset({"uuid", "date_created", "date_modified"})


class Cart(Resource):
    collection_path = "/carts"


class RequestLog(Resource):
    legacy = True


class Store(Resource):
    legacy = True


RESOURCE_TYPES: dict[ResourceKind, type[Resource]] = {
    ResourceKind.RESOURCE: Resource,
    ResourceKind.ADDRESS: Address,
    ResourceKind.BANNER: Banner,
    ResourceKind.BRAND: Brand,
    ResourceKind.CART: Cart,
    ResourceKind.CATEGORY: Category,
    ResourceKind.COUPON: Coupon,
    ResourceKind.CURRENCY: Currency,
    ResourceKind.CUSTOMER: Customer,
    ResourceKind.CUSTOMER_ADDRESS: CustomerAddress,
    ResourceKind.CUSTOMER_ATTRIBUTE: CustomerAttribute,
    ResourceKind.CUSTOMER_GROUP: CustomerGroup,
    ResourceKind.GIFT_CERTIFICATE: GiftCertificate,
    ResourceKind.LOCATION: Location,
    ResourceKind.OPTION: Option,
    ResourceKind.OPTION_SET: OptionSet,
    ResourceKind.OPTION_VALUE: OptionValue,
    ResourceKind.ORDER: Order,
    ResourceKind.ORDER_COUPON: OrderCoupons,
    ResourceKind.ORDER_PRODUCT: OrderProduct,
    ResourceKind.ORDER_STATUS: OrderStatus,
    ResourceKind.PAGE: Page,
    ResourceKind.PRICELIST: Pricelist,
    ResourceKind.PRICELIST_RECORD: PricelistRecord,
    ResourceKind.PRODUCT: Product,
    ResourceKind.PRODUCT_CUSTOM_FIELD: ProductCustomField,
    ResourceKind.PRODUCT_IMAGE: ProductImage,
    ResourceKind.PRODUCT_OPTION: ProductOption,
    ResourceKind.PRODUCT_REVIEW: ProductReview,
    ResourceKind.PRODUCT_VARIANT: ProductVariant,
    ResourceKind.REQUEST_LOG: RequestLog,
    ResourceKind.RULE: Rule,
    ResourceKind.SHIPMENT: Shipment,
    ResourceKind.SHIPPING_METHOD: ShippingMethod,
    ResourceKind.SHIPPING_ZONE: ShippingZone,
    ResourceKind.SKU: Sku,
    ResourceKind.STORE: Store,
    ResourceKind.WEBHOOK: Webhook,
    ResourceKind.WIDGET: Widget,
}
