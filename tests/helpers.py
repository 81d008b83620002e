"""Response builders and settings shared by the test modules."""

import json
from unittest.mock import MagicMock

import requests

from bigcommerce_api.client import BigcommerceClient

OAUTH_SETTINGS = {
    "client_id": "client-123",
    "auth_token": "token-abc",
    "store_hash": "abc123",
}

BASIC_SETTINGS = {
    "connection_mode": "basic_auth",
    "store_url": "https://store.example.com/",
    "username": "admin",
    "api_key": "key-xyz",
}

API_PATH = "https://api.bigcommerce.com/stores/abc123/v3"
LEGACY_API_PATH = "https://api.bigcommerce.com/stores/abc123/v2"


def make_response(status: int = 200, body=None, headers: dict = None, reason: str = "OK", text: str = None):
    """Build a real requests.Response with a JSON (or raw text) body."""
    response = requests.Response()
    response.status_code = status
    response.reason = reason
    response.encoding = "utf-8"
    if text is None:
        text = "" if body is None else json.dumps(body)
    response._content = text.encode("utf-8")
    response.headers.update(headers or {})
    return response


def page(items: list, next_link: str = None) -> dict:
    """A current-API collection page."""
    links = {"current": "?page=1"}
    if next_link:
        links["next"] = next_link
    return {"data": items, "meta": {"pagination": {"total": len(items), "links": links}}}


def mock_session(client: BigcommerceClient, *responses) -> MagicMock:
    """Replace the HTTP call of the client's session with canned responses."""
    request = MagicMock(side_effect=list(responses))
    client.connection().session.request = request
    return request


def requested_urls(request: MagicMock) -> list:
    return [c.args[1] for c in request.call_args_list]
