"""Unit tests for the HTTP connection."""

import base64
from unittest.mock import MagicMock

import pytest
import requests
from tests.helpers import make_response

from bigcommerce_api.connection import Connection
from bigcommerce_api.exceptions import ClientError, ServerError


@pytest.fixture
def connection():
    return Connection()


def _stub(connection: Connection, *responses) -> MagicMock:
    connection.session.request = MagicMock(side_effect=list(responses))
    return connection.session.request


class TestAuthentication:
    def test_default_json_headers(self, connection):
        headers = connection.request_headers
        assert headers["Accept"] == "application/json"
        assert headers["Content-Type"] == "application/json"

    def test_oauth_headers(self, connection):
        connection.authenticate_oauth("client-123", "token-abc")
        assert connection.request_headers["X-Auth-Client"] == "client-123"
        assert connection.request_headers["X-Auth-Token"] == "token-abc"

    def test_basic_header(self, connection):
        connection.authenticate_basic("admin", "secret")
        expected = base64.b64encode(b"admin:secret").decode()
        assert connection.request_headers["Authorization"] == f"Basic {expected}"

    def test_remove_header(self, connection):
        connection.add_header("X-Custom", "1")
        connection.remove_header("X-Custom")
        connection.remove_header("X-Never-Set")
        assert "X-Custom" not in connection.request_headers


class TestClassification:
    def test_404_raises_client_error(self, connection):
        _stub(connection, make_response(404, {"title": "Not found"}, reason="Not Found"))

        with pytest.raises(ClientError) as exc_info:
            connection.get("https://example.com/thing")

        assert exc_info.value.code == 404
        assert exc_info.value.message == '{"title": "Not found"}'

    def test_503_raises_server_error_with_prefix(self, connection):
        _stub(connection, make_response(503, text="maintenance", reason="Service Unavailable"))

        with pytest.raises(ServerError) as exc_info:
            connection.get("https://example.com/thing")

        assert exc_info.value.code == 503
        assert exc_info.value.message == "BigCommerce Server Exception: maintenance"
        assert exc_info.value.body == "maintenance"

    def test_201_is_success(self, connection):
        _stub(connection, make_response(201, {"data": {"id": 7}}, reason="Created"))
        assert connection.post("https://example.com/things", {"name": "x"}) == {"data": {"id": 7}}

    def test_boundaries(self, connection):
        _stub(connection, make_response(399, {"ok": True}), make_response(499, text="x"),
              make_response(599, text="y"), make_response(600, {"odd": True}))

        assert connection.get("https://example.com/a") == {"ok": True}
        with pytest.raises(ClientError):
            connection.get("https://example.com/b")
        with pytest.raises(ServerError):
            connection.get("https://example.com/c")
        assert connection.get("https://example.com/d") == {"odd": True}

    def test_empty_body_decodes_to_none(self, connection):
        _stub(connection, make_response(204, reason="No Content"))
        assert connection.get("https://example.com/empty") is None

    def test_network_failure_is_not_classified(self, connection):
        connection.session.request = MagicMock(side_effect=requests.ConnectionError("refused"))
        with pytest.raises(requests.ConnectionError):
            connection.get("https://example.com/down")


class TestRequest:
    def test_body_sent_as_json_with_verify_flag(self):
        connection = Connection(verify_peer=False, timeout=5)
        request = _stub(connection, make_response(200, {"id": 1}))

        connection.put("https://example.com/things/1", {"name": "x"})

        request.assert_called_once_with(
            "PUT",
            "https://example.com/things/1",
            params=None,
            json={"name": "x"},
            verify=False,
            timeout=5,
        )

    def test_last_response_is_recorded(self, connection):
        _stub(connection, make_response(200, {"id": 1}, headers={"X-Rate-Limit-Requests-Left": "42"}))

        connection.get("https://example.com/things/1")

        assert connection.last_response.status == 200
        assert connection.last_response.reason == "OK"
        assert connection.get_header("x-rate-limit-requests-left") == "42"
        assert connection.last_response.body == '{"id": 1}'

    def test_delete_and_head_return_nothing(self, connection):
        request = _stub(connection, make_response(204), make_response(200, headers={"Content-Length": "10"}))

        assert connection.delete("https://example.com/things/1") is None
        assert connection.head("https://example.com/things") is None
        assert [c.args[0] for c in request.call_args_list] == ["DELETE", "HEAD"]
