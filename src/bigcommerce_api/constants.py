"""Constants used throughout the client."""

from enum import Enum


class ConnectionMode(str, Enum):
    """Authentication modes."""

    OAUTH = "OAUTH"
    BASIC_AUTH = "BASIC_AUTH"


# Hosts
API_URL = "https://api.bigcommerce.com"
LOGIN_URL = "https://login.bigcommerce.com"

# Path prefixes, formatted with the store hash (OAuth) or appended to the store URL (basic auth)
STORES_PREFIX = "/stores/{store_hash}/v3"
LEGACY_STORES_PREFIX = "/stores/{store_hash}/v2"
PATH_PREFIX = "/api/v3"
LEGACY_PATH_PREFIX = "/api/v2"

MEDIA_TYPE_JSON = "application/json"

# HTTP Status Codes
HTTP_NOT_FOUND = 404
CLIENT_ERROR_RANGE = range(400, 500)
SERVER_ERROR_RANGE = range(500, 600)

RATE_LIMIT_HEADER = "X-Rate-Limit-Requests-Left"

DEFAULT_CONFIG_PATH = "data/config.yaml"
ENV_PREFIX = "BIGCOMMERCE_"
