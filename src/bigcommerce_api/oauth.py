"""OAuth token exchange for BigCommerce apps."""

import logging
from typing import Optional

from .connection import Connection
from .constants import LOGIN_URL

logger = logging.getLogger(__name__)


def get_auth_token(params: dict, login_url: str = LOGIN_URL, verify_peer: bool = True) -> dict:
    """Swap a temporary access code for a long expiry auth token.

    ``params`` is merged over ``grant_type=authorization_code`` and posted as
    JSON to the login service on an unauthenticated connection.
    """
    context = {"grant_type": "authorization_code", **params}
    connection = Connection(verify_peer=verify_peer)

    logger.debug(f"Sending token request to {login_url}/oauth2/token")
    token = connection.post(f"{login_url}/oauth2/token", context)
    logger.info("Exchanged authorization code for access token")
    return token


def exchange_code_for_token(
    client_id: str,
    client_secret: str,
    code: str,
    scope: str,
    context: str,
    redirect_uri: str,
    login_url: str = LOGIN_URL,
    verify_peer: bool = True,
) -> dict:
    """Exchange the code received by an app's auth callback for an access token."""
    data = {
        "client_id": client_id,
        "client_secret": client_secret,
        "code": code,
        "scope": scope,
        "context": context,
        "redirect_uri": redirect_uri,
    }
    return get_auth_token(data, login_url=login_url, verify_peer=verify_peer)


def store_hash_from_context(context: str) -> Optional[str]:
    """Extract the store hash from a ``stores/{hash}`` auth context."""
    prefix = "stores/"
    if context and context.startswith(prefix):
        return context[len(prefix):] or None
    return None
