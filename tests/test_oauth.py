"""Tests for the OAuth token exchange."""

from unittest.mock import MagicMock, patch

from tests.helpers import make_response

from bigcommerce_api.client import BigcommerceClient
from bigcommerce_api.oauth import exchange_code_for_token, get_auth_token, store_hash_from_context

TOKEN = {"access_token": "new-token", "scope": "store_v2_products", "context": "stores/abc123"}


class TestGetAuthToken:
    @patch("bigcommerce_api.oauth.Connection")
    def test_defaults_grant_type(self, MockConnection):
        connection = MagicMock()
        connection.post.return_value = TOKEN
        MockConnection.return_value = connection

        result = get_auth_token({"code": "tmp", "client_id": "id"})

        assert result == TOKEN
        url, body = connection.post.call_args.args
        assert url == "https://login.bigcommerce.com/oauth2/token"
        assert body == {"grant_type": "authorization_code", "code": "tmp", "client_id": "id"}
        connection.authenticate_oauth.assert_not_called()

    @patch("bigcommerce_api.oauth.Connection")
    def test_exchange_code_sends_all_fields(self, MockConnection):
        connection = MagicMock()
        connection.post.return_value = TOKEN
        MockConnection.return_value = connection

        exchange_code_for_token("id", "secret", "tmp", "store_v2_products", "stores/abc123",
                                "https://app.example.com/auth")

        body = connection.post.call_args.args[1]
        assert body["client_secret"] == "secret"
        assert body["context"] == "stores/abc123"
        assert body["redirect_uri"] == "https://app.example.com/auth"

    def test_client_uses_unauthenticated_connection(self, client: BigcommerceClient):
        with patch("bigcommerce_api.oauth.Connection") as MockConnection:
            connection = MockConnection.return_value
            connection.post.return_value = TOKEN
            client.get_auth_token({"code": "tmp"})
        MockConnection.assert_called_once_with(verify_peer=True)

    def test_real_connection_posts_json(self):
        with patch("requests.Session.request", return_value=make_response(200, TOKEN)) as request:
            assert get_auth_token({"code": "tmp"}) == TOKEN
        assert request.call_args.kwargs["json"]["grant_type"] == "authorization_code"


def test_store_hash_from_context():
    assert store_hash_from_context("stores/abc123") == "abc123"
    assert store_hash_from_context("accounts/1") is None
    assert store_hash_from_context("") is None
