"""Configuration management using Pydantic models."""

import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, field_validator

from .constants import (
    API_URL,
    ENV_PREFIX,
    LEGACY_PATH_PREFIX,
    LEGACY_STORES_PREFIX,
    LOGIN_URL,
    PATH_PREFIX,
    STORES_PREFIX,
    ConnectionMode,
)
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


REQUIRED_KEYS = {
    ConnectionMode.OAUTH: ("client_id", "auth_token", "store_hash"),
    ConnectionMode.BASIC_AUTH: ("store_url", "username", "api_key"),
}

# Accepted spellings of connection_mode
MODE_ALIASES = {
    "oauth": ConnectionMode.OAUTH,
    "basic_auth": ConnectionMode.BASIC_AUTH,
    "basicauth": ConnectionMode.BASIC_AUTH,
    "basic": ConnectionMode.BASIC_AUTH,
}

ENV_KEYS = (
    "connection_mode",
    "client_id",
    "auth_token",
    "store_hash",
    "client_secret",
    "store_url",
    "username",
    "api_key",
    "verify_peer",
    "timeout",
)


class ClientSettings(BaseModel):
    """Connection settings for one client."""

    connection_mode: ConnectionMode = ConnectionMode.OAUTH

    # OAuth
    client_id: Optional[str] = None
    auth_token: Optional[str] = None
    store_hash: Optional[str] = None
    client_secret: Optional[str] = None

    # Basic auth
    store_url: Optional[str] = None
    username: Optional[str] = None
    api_key: Optional[str] = None

    verify_peer: bool = True
    timeout: Optional[float] = None
    api_url: str = API_URL
    login_url: str = LOGIN_URL

    @field_validator("connection_mode", mode="before")
    @classmethod
    def normalize_mode(cls, v):
        """Accept the mode names in any case, with or without underscores."""
        if v is None:
            return ConnectionMode.OAUTH
        if isinstance(v, str):
            return MODE_ALIASES.get(v.strip().lower(), v)
        return v

    @field_validator("store_url")
    @classmethod
    def strip_trailing_slash(cls, v):
        return v.rstrip("/") if v else v

    def validate_credentials(self) -> None:
        """Raise ConfigurationError naming the first required key that is missing."""
        for key in REQUIRED_KEYS[self.connection_mode]:
            if not getattr(self, key):
                raise ConfigurationError(f"{key} must be provided", key=key)

    @property
    def api_path(self) -> str:
        """Base URL of the current (v3) API."""
        if self.connection_mode == ConnectionMode.OAUTH:
            return self.api_url + STORES_PREFIX.format(store_hash=self.store_hash)
        return self.store_url + PATH_PREFIX

    @property
    def legacy_api_path(self) -> str:
        """Base URL of the legacy (v2) API."""
        if self.connection_mode == ConnectionMode.OAUTH:
            return self.api_url + LEGACY_STORES_PREFIX.format(store_hash=self.store_hash)
        return self.store_url + LEGACY_PATH_PREFIX


SettingsInput = Union[ClientSettings, Mapping[str, Any]]


def build_settings(settings: SettingsInput) -> ClientSettings:
    """Validate a settings mapping (or model) for its connection mode."""
    if not isinstance(settings, ClientSettings):
        settings = ClientSettings(**{k: v for k, v in dict(settings).items() if v is not None})
    settings.validate_credentials()
    return settings


def settings_from_env(environ: Optional[Mapping[str, str]] = None) -> dict:
    """Collect BIGCOMMERCE_* variables as raw settings."""
    environ = os.environ if environ is None else environ
    raw = {}
    for key in ENV_KEYS:
        value = environ.get(f"{ENV_PREFIX}{key.upper()}")
        if value:
            raw[key] = value
    return raw


def load_settings(path: Optional[Union[str, Path]] = None,
                  environ: Optional[Mapping[str, str]] = None) -> ClientSettings:
    """Load settings from a YAML file, overridden by environment variables.

    The file is optional; a missing file means environment only. Credentials
    are validated before returning.
    """
    raw_config: dict = {}
    if path is not None:
        config_path = Path(path)
        if config_path.exists():
            with open(config_path, "r", encoding="utf-8") as f:
                raw_config = yaml.safe_load(f) or {}
            # Allow the settings to live under a "bigcommerce" section
            if isinstance(raw_config.get("bigcommerce"), dict):
                raw_config = raw_config["bigcommerce"]
            logger.info(f"Loaded configuration from {config_path}")
        else:
            logger.debug(f"No config file at {config_path}, using environment")

    raw_config.update(settings_from_env(environ))
    return build_settings(raw_config)
