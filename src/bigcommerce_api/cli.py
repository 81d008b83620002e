"""Command-line interface for the BigCommerce client."""

import json
import logging
import sys

import click
import requests

from .client import BigcommerceClient
from .config import load_settings
from .constants import DEFAULT_CONFIG_PATH
from .endpoints import ENDPOINTS, get_endpoint
from .exceptions import BigcommerceError, ConfigurationError, HttpError
from .oauth import exchange_code_for_token, store_hash_from_context
from .resources import Resource

logger = logging.getLogger(__name__)


def setup_logging(level: str):
    """Configure logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def _show_config_error(error: ConfigurationError, config_path: str):
    """Display configuration error message and exit."""
    logger.error("=" * 60)
    logger.error(f"CONFIGURATION ERROR: {error}")
    logger.error("=" * 60)
    logger.error(f"Edit {config_path} or set BIGCOMMERCE_* environment variables")
    logger.error("  OAuth:      client_id, auth_token, store_hash")
    logger.error("  Basic auth: connection_mode: basic_auth, store_url, username, api_key")
    sys.exit(1)


def _to_jsonable(value):
    if isinstance(value, Resource):
        return value.to_dict()
    if isinstance(value, list):
        return [_to_jsonable(item) for item in value]
    return value


def _echo_json(value):
    click.echo(json.dumps(_to_jsonable(value), indent=2, default=str))


def _parse_filters(pairs: tuple) -> dict:
    filters = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {pair!r}", param_hint="--filter")
        filters[key] = value
    return filters


def _make_client(ctx: click.Context) -> BigcommerceClient:
    config_path = ctx.obj["config_path"]
    try:
        return BigcommerceClient(load_settings(config_path))
    except ConfigurationError as e:
        _show_config_error(e, config_path)


def _run(action):
    """Run a client action, turning API errors into a non-zero exit."""
    try:
        return action()
    except HttpError as e:
        logger.error(f"BigCommerce API error (HTTP {e.code})")
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    except (BigcommerceError, requests.RequestException) as e:
        logger.error(f"Request failed: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(version="0.1.0")
@click.option(
    "--config",
    "config_path",
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="YAML settings file (BIGCOMMERCE_* environment variables override it)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    default="WARNING",
    help="Logging level",
)
@click.pass_context
def main(ctx: click.Context, config_path: str, log_level: str):
    """BigCommerce store API client."""
    setup_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


@main.command()
@click.pass_context
def ping(ctx: click.Context):
    """Test the connection by fetching the store time."""
    client = _make_client(ctx)
    store_time = _run(client.get_time)
    if store_time is None:
        click.echo("No time returned", err=True)
        sys.exit(1)
    click.echo(f"Store time: {store_time.isoformat()}")


@main.command()
def endpoints():
    """List the available operations."""
    for endpoint in ENDPOINTS:
        version = "v2" if endpoint.legacy else "v3"
        click.echo(f"{endpoint.name:<40} {endpoint.action.value:<10} {version} {endpoint.path}")


@main.command()
@click.argument("name")
@click.argument("args", nargs=-1)
@click.option("--filter", "-f", "filters", multiple=True, help="Filter as key=value (repeatable)")
@click.option("--body", "-b", help="JSON request body for create/update operations")
@click.pass_context
def call(ctx: click.Context, name: str, args: tuple, filters: tuple, body: str):
    """Call operation NAME with path ARGS, e.g. `call get_product 42`."""
    try:
        get_endpoint(name)
    except KeyError:
        raise click.BadParameter(f"unknown operation {name!r}; see `endpoints`", param_hint="NAME")

    payload = None
    if body is not None:
        try:
            payload = json.loads(body)
        except json.JSONDecodeError as e:
            raise click.BadParameter(f"invalid JSON: {e}", param_hint="--body")

    filter_values = _parse_filters(filters)
    client = _make_client(ctx)
    result = _run(lambda: client.call(name, *args, body=payload, filters=filter_values or None))
    if result is not None:
        _echo_json(result)


@main.command("rate-limit")
@click.pass_context
def rate_limit(ctx: click.Context):
    """Show the number of API requests remaining."""
    client = _make_client(ctx)
    remaining = _run(client.get_requests_remaining)
    click.echo("unknown" if remaining is None else str(remaining))


@main.command()
@click.option("--client-id", required=True, envvar="BIGCOMMERCE_CLIENT_ID")
@click.option("--client-secret", required=True, envvar="BIGCOMMERCE_CLIENT_SECRET")
@click.option("--code", required=True, help="Temporary code from the auth callback")
@click.option("--scope", required=True)
@click.option("--context", "auth_context", required=True, help="stores/{store_hash}")
@click.option("--redirect-uri", required=True)
def token(client_id: str, client_secret: str, code: str, scope: str, auth_context: str, redirect_uri: str):
    """Exchange an OAuth authorization code for an access token."""
    result = _run(lambda: exchange_code_for_token(
        client_id, client_secret, code, scope, auth_context, redirect_uri,
    ))
    store_hash = store_hash_from_context(result.get("context", auth_context))
    if store_hash:
        logger.info(f"Token issued for store {store_hash}")
    _echo_json(result)
