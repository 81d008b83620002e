"""BigCommerce API client."""

import logging
from datetime import datetime, timezone
from functools import partial
from typing import Any, Optional
from urllib.parse import quote

from .config import ClientSettings, SettingsInput, build_settings
from .connection import Connection
from .constants import HTTP_NOT_FOUND, RATE_LIMIT_HEADER, ConnectionMode
from .endpoints import ENDPOINTS_BY_NAME, Action, Endpoint, get_endpoint
from .exceptions import BigcommerceError, ClientError, ConfigurationError
from .filters import Filter
from .mapper import KindInput, map_collection, map_count, map_resource
from .oauth import get_auth_token
from .pagination import collect_pages
from .resources import Resource, ResourceKind

logger = logging.getLogger(__name__)


class BigcommerceClient:
    """Client for the BigCommerce store management API (v3, with v2 for legacy endpoints).

    Every operation in ``endpoints.ENDPOINTS`` is available as a method of
    the same name, e.g. ``client.get_products({"is_visible": True})`` or
    ``client.update_product(42, {"price": 9.99})``. Path ids are positional;
    the body (write operations) or filter (read operations) follows them.
    """

    def __init__(self, settings: Optional[SettingsInput] = None):
        """Initialize the client, configuring it if settings are given."""
        self._settings: Optional[ClientSettings] = None
        self._connection: Optional[Connection] = None
        if settings is not None:
            self.configure(settings)

    # Configuration and connection

    def configure(self, settings: SettingsInput) -> None:
        """Validate credentials and derive the API base paths.

        Raises ConfigurationError naming the first missing key. Any cached
        connection is discarded so the next request uses the new credentials.
        """
        self._settings = build_settings(settings)
        self._connection = None
        logger.info(f"Configured BigCommerce client ({self._settings.connection_mode.value}) "
                    f"for {self._settings.api_path}")

    @property
    def settings(self) -> ClientSettings:
        if self._settings is None:
            raise ConfigurationError("Client is not configured; call configure() first")
        return self._settings

    @property
    def api_path(self) -> str:
        return self.settings.api_path

    @property
    def legacy_api_path(self) -> str:
        return self.settings.legacy_api_path

    def connection(self) -> Connection:
        """Return the authenticated connection, creating it on first use."""
        if self._connection is None:
            settings = self.settings
            connection = Connection(verify_peer=settings.verify_peer, timeout=settings.timeout)
            if settings.connection_mode == ConnectionMode.OAUTH:
                connection.authenticate_oauth(settings.client_id, settings.auth_token)
            else:
                connection.authenticate_basic(settings.username, settings.api_key)
            self._connection = connection
        return self._connection

    def _url(self, path: str, legacy: bool = False) -> str:
        return (self.legacy_api_path if legacy else self.api_path) + path

    # Resource CRUD

    def get_collection(self, path: str, kind: KindInput = ResourceKind.RESOURCE,
                       legacy: bool = False) -> list:
        """GET a collection, following pagination links on the current API."""
        response = self.connection().get(self._url(path, legacy))
        if legacy:
            # The v2 API answers an empty collection with 204 No Content
            return map_collection(kind, [] if response is None else response)

        data = collect_pages(path, response, self._fetch_page)
        return map_collection(kind, data)

    def _fetch_page(self, page_path: str) -> Any:
        if page_path.startswith(("http://", "https://")):
            return self.connection().get(page_path)
        return self.connection().get(self._url(page_path))

    def get_resource(self, path: str, kind: KindInput = ResourceKind.RESOURCE,
                     legacy: bool = False) -> Resource:
        return map_resource(kind, self.connection().get(self._url(path, legacy)))

    def get_count(self, path: str, legacy: bool = False) -> int:
        return map_count(self.connection().get(self._url(path, legacy)))

    def create_resource(self, path: str, body: Any, kind: KindInput = ResourceKind.RESOURCE,
                        legacy: bool = False) -> Resource:
        logger.debug(f"Create resource {path}")
        return map_resource(kind, self.connection().post(self._url(path, legacy), body))

    def update_resource(self, path: str, body: Any, kind: KindInput = ResourceKind.RESOURCE,
                        legacy: bool = False) -> Resource:
        logger.debug(f"Update resource {path}")
        return map_resource(kind, self.connection().put(self._url(path, legacy), body))

    def update_raw(self, path: str, body: Any, legacy: bool = False) -> Any:
        """PUT without mapping the response."""
        logger.debug(f"Update raw {path}")
        return self.connection().put(self._url(path, legacy), body)

    def delete_resource(self, path: str, legacy: bool = False) -> None:
        self.connection().delete(self._url(path, legacy))

    # Generic dispatch

    def call(self, name: str, *args, body: Any = None, filters: Any = None, **filter_kwargs) -> Any:
        """Invoke the endpoint ``name`` from the endpoint table."""
        endpoint = get_endpoint(name)
        params = endpoint.path_params
        if len(args) < len(params):
            missing = ", ".join(params[len(args):])
            raise TypeError(f"{name}() missing path argument(s): {missing}")

        ids, rest = args[:len(params)], args[len(params):]
        if len(rest) > 1:
            raise TypeError(f"{name}() takes {len(params) + 1} positional arguments at most")

        if endpoint.takes_body:
            if rest:
                body = rest[0]
            if body is None:
                raise TypeError(f"{name}() requires a body")
            if isinstance(body, Resource):
                body = body.get_create_fields() if endpoint.action == Action.CREATE else body.get_update_fields()
        elif rest:
            if not endpoint.takes_filter:
                raise TypeError(f"{name}() takes no filter or body")
            filters = rest[0]

        if not endpoint.takes_filter and (filters is not None or filter_kwargs):
            raise TypeError(f"{name}() takes no filter")

        query_filter = Filter(Filter.create(filters).parameters)
        for key, value in filter_kwargs.items():
            query_filter[key] = value

        path = self._compose_path(endpoint, ids, query_filter)
        logger.debug(f"{name} -> {endpoint.action.value} {path}")
        return self._dispatch(endpoint, path, body)

    @staticmethod
    def _compose_path(endpoint: Endpoint, ids: tuple, query_filter: Filter) -> str:
        values = {param: quote(str(value), safe="") for param, value in zip(endpoint.path_params, ids)}
        path = endpoint.path.format(**values)
        query = query_filter.to_query() if endpoint.takes_filter else ""
        if query and "?" in path:
            return f"{path}&{query[1:]}"
        return path + query

    def _dispatch(self, endpoint: Endpoint, path: str, body: Any) -> Any:
        action, kind, legacy = endpoint.action, endpoint.kind, endpoint.legacy
        if action == Action.COLLECTION:
            return self.get_collection(path, kind, legacy)
        if action == Action.FIRST:
            items = self.get_collection(path, kind, legacy)
            return items[0] if items else None
        if action == Action.RESOURCE:
            return self.get_resource(path, kind, legacy)
        if action == Action.COUNT:
            return self.get_count(path, legacy)
        if action == Action.CREATE:
            return self.create_resource(path, body, kind, legacy)
        if action == Action.UPDATE:
            return self.update_resource(path, body, kind, legacy)
        if action == Action.DELETE:
            return self.delete_resource(path, legacy)
        return self.update_raw(path, body, legacy)

    def __getattr__(self, name: str):
        if not name.startswith("_") and name in ENDPOINTS_BY_NAME:
            return partial(self.call, name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __dir__(self):
        return sorted(set(super().__dir__()) | set(ENDPOINTS_BY_NAME))

    # Resource instances

    def _item_path(self, resource: Resource) -> str:
        try:
            path = resource.resource_path()
        except KeyError as e:
            raise BigcommerceError(f"{type(resource).__name__} needs field {e} to build its path") from None
        if path is None:
            raise BigcommerceError(f"{type(resource).__name__} has no collection path")
        return path

    def create(self, resource: Resource) -> Resource:
        """POST a resource's create fields to its collection."""
        return self.create_resource(self._item_path(resource), resource.get_create_fields(),
                                    type(resource), resource.legacy)

    def update(self, resource: Resource) -> Resource:
        """PUT a resource's update fields to its item path."""
        if resource.id is None:
            raise BigcommerceError(f"Cannot update {type(resource).__name__} without an id")
        path = f"{self._item_path(resource)}/{resource.id}"
        return self.update_resource(path, resource.get_update_fields(), type(resource), resource.legacy)

    def delete(self, resource: Resource) -> None:
        if resource.id is None:
            raise BigcommerceError(f"Cannot delete {type(resource).__name__} without an id")
        self.delete_resource(f"{self._item_path(resource)}/{resource.id}", resource.legacy)

    # Operations outside the endpoint table

    def get_time(self) -> Optional[datetime]:
        """Ping the time endpoint; useful to test the connection to a store."""
        response = self.connection().get(self._url("/time", legacy=True))
        if not response:
            return None
        timestamp = response.get("time") if isinstance(response, dict) else response
        return datetime.fromtimestamp(int(timestamp), tz=timezone.utc)

    def get_store(self) -> Resource:
        return self.get_resource("/store", ResourceKind.STORE, legacy=True)

    def get_requests_remaining(self) -> Optional[int]:
        """Rate limit allowance reported by the last response.

        Pings the time endpoint first when no request has been made yet.
        """
        limit = self.connection().get_header(RATE_LIMIT_HEADER)
        if not limit:
            if self.get_time() is None:
                return None
            limit = self.connection().get_header(RATE_LIMIT_HEADER)
        return int(limit) if limit else None

    def get_auth_token(self, params: dict) -> dict:
        """Swap a temporary OAuth code for a permanent access token."""
        if self._settings is None:
            return get_auth_token(params)
        return get_auth_token(params, login_url=self._settings.login_url,
                              verify_peer=self._settings.verify_peer)

    def get_cart(self, cart_id: str) -> Optional[Resource]:
        """Fetch a cart, or None if it does not exist."""
        try:
            return self.get_resource(f"/carts/{quote(str(cart_id), safe='')}", ResourceKind.CART)
        except ClientError as e:
            if e.code == HTTP_NOT_FOUND:
                logger.debug(f"Cart {cart_id} not found")
                return None
            raise

    def update_customer(self, customer_id: int, fields: dict) -> Optional[Resource]:
        """Update one customer through the batch customers endpoint."""
        response = self.update_raw("/customers", [{"id": customer_id, **fields}])
        data = response.get("data") if isinstance(response, dict) else response
        customers = map_collection(ResourceKind.CUSTOMER, data)
        return customers[0] if customers else None

    def delete_customers(self, ids: list) -> None:
        self.delete_resource("/customers" + Filter({"id:in": list(ids)}).to_query())

    def assign_product_to_channel(self, product_id: int, channel_id: int) -> None:
        self.update_raw("/catalog/products/channel-assignments", [{
            "product_id": product_id,
            "channel_id": channel_id,
        }])

    def assign_layout_to_product_in_channel(self, product_id: int, channel_id: int, layout_file: str) -> None:
        self.update_raw("/storefront/custom-template-associations", [{
            "entity_type": "product",
            "entity_id": product_id,
            "channel_id": channel_id,
            "file_name": layout_file,
        }])

    def upsert_pricelist_to_customer_group(self, pricelist_id: int, customer_group_id: int,
                                           channel_id: int) -> None:
        self.update_raw(f"/pricelists/{pricelist_id}/assignments", {
            "customer_group_id": customer_group_id,
            "channel_id": channel_id,
        })

    def upsert_customer_attribute_value(self, customer_id: int, attribute_id: int, value: Any) -> Any:
        return self.update_raw("/customers/attribute-values", [{
            "customer_id": customer_id,
            "attribute_id": attribute_id,
            "value": value,
        }])
