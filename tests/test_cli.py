"""Tests for the command-line interface."""

import json
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

from click.testing import CliRunner

from bigcommerce_api.cli import main
from bigcommerce_api.exceptions import ClientError
from bigcommerce_api.resources import Product

ENV = {
    "BIGCOMMERCE_CLIENT_ID": "client-123",
    "BIGCOMMERCE_AUTH_TOKEN": "token-abc",
    "BIGCOMMERCE_STORE_HASH": "abc123",
}


def _invoke(args, tmp_path, env=ENV):
    runner = CliRunner()
    return runner.invoke(main, ["--config", str(tmp_path / "config.yaml"), *args], env=env)


class TestCliCall:
    @patch("bigcommerce_api.cli.BigcommerceClient")
    def test_call_prints_json(self, MockClient, tmp_path):
        mock_client = MagicMock()
        mock_client.call.return_value = [Product(id=1, name="Widget")]
        MockClient.return_value = mock_client

        result = _invoke(["call", "get_products", "-f", "is_visible=true"], tmp_path)

        assert result.exit_code == 0
        assert json.loads(result.output) == [{"id": 1, "name": "Widget"}]
        mock_client.call.assert_called_once_with(
            "get_products", body=None, filters={"is_visible": "true"},
        )

    @patch("bigcommerce_api.cli.BigcommerceClient")
    def test_call_passes_ids_and_body(self, MockClient, tmp_path):
        mock_client = MagicMock()
        mock_client.call.return_value = Product(id=42, price=9.99)
        MockClient.return_value = mock_client

        result = _invoke(["call", "update_product", "42", "--body", '{"price": 9.99}'], tmp_path)

        assert result.exit_code == 0
        mock_client.call.assert_called_once_with("update_product", "42", body={"price": 9.99}, filters=None)

    def test_unknown_operation(self, tmp_path):
        result = _invoke(["call", "launch_rocket"], tmp_path)
        assert result.exit_code != 0
        assert "unknown operation" in result.output

    def test_invalid_body(self, tmp_path):
        result = _invoke(["call", "create_product", "--body", "{not json"], tmp_path)
        assert result.exit_code != 0
        assert "invalid JSON" in result.output

    @patch("bigcommerce_api.cli.BigcommerceClient")
    def test_api_error_exits_non_zero(self, MockClient, tmp_path):
        mock_client = MagicMock()
        mock_client.call.side_effect = ClientError('{"title": "Not Found"}', 404)
        MockClient.return_value = mock_client

        result = _invoke(["call", "get_product", "9"], tmp_path)

        assert result.exit_code == 1

    def test_missing_credentials_exit(self, tmp_path):
        result = _invoke(["call", "get_products"], tmp_path, env={"BIGCOMMERCE_CLIENT_ID": "only-this"})
        assert result.exit_code == 1


class TestCliCommands:
    def test_endpoints_lists_operations(self, tmp_path):
        result = _invoke(["endpoints"], tmp_path)
        assert result.exit_code == 0
        assert "get_products" in result.output
        assert "/orders" in result.output

    @patch("bigcommerce_api.cli.BigcommerceClient")
    def test_ping(self, MockClient, tmp_path):
        MockClient.return_value.get_time.return_value = datetime(2024, 1, 1, tzinfo=timezone.utc)

        result = _invoke(["ping"], tmp_path)

        assert result.exit_code == 0
        assert "2024-01-01T00:00:00+00:00" in result.output

    @patch("bigcommerce_api.cli.BigcommerceClient")
    def test_rate_limit(self, MockClient, tmp_path):
        MockClient.return_value.get_requests_remaining.return_value = 148

        result = _invoke(["rate-limit"], tmp_path)

        assert result.exit_code == 0
        assert result.output.strip() == "148"

    @patch("bigcommerce_api.cli.exchange_code_for_token")
    def test_token(self, mock_exchange, tmp_path):
        mock_exchange.return_value = {"access_token": "t", "context": "stores/abc123"}

        result = _invoke([
            "token", "--client-id", "id", "--client-secret", "secret", "--code", "c",
            "--scope", "store_v2_products", "--context", "stores/abc123",
            "--redirect-uri", "https://app.example.com/auth",
        ], tmp_path)

        assert result.exit_code == 0
        assert json.loads(result.output)["access_token"] == "t"
