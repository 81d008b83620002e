"""Client for the BigCommerce store management REST API."""

from .client import BigcommerceClient
from .config import ClientSettings, load_settings
from .constants import ConnectionMode
from .exceptions import (
    BigcommerceError,
    ClientError,
    ConfigurationError,
    MappingError,
    ServerError,
)
from .filters import Filter
from .resources import Resource, ResourceKind

__version__ = "0.1.0"

__all__ = [
    "BigcommerceClient",
    "BigcommerceError",
    "ClientError",
    "ClientSettings",
    "ConfigurationError",
    "ConnectionMode",
    "Filter",
    "MappingError",
    "Resource",
    "ResourceKind",
    "ServerError",
    "load_settings",
]
