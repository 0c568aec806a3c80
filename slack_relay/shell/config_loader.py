"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

Models (Config, ClientConfig) are defined in slack_relay/core/config.py
to avoid information leakage between layers.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from slack_relay.core.config import (
    DEFAULT_API_URL,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_TIMEOUT_MS,
    ClientConfig,
    Config,
)
from slack_relay.core.webhooks import normalize_webhooks


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "config/config.yaml"


def _resolve_value(value: Any) -> Any:
    """Resolve a ${VAR} placeholder from the environment.

    Non-strings and plain strings are returned unchanged. A placeholder
    whose variable is not set is returned as-is so validation can flag it.
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def _split_list(value: str) -> list[str]:
    """Split a comma-separated env value, dropping blanks."""
    return [part.strip() for part in value.split(",") if part.strip()]


def _parse_webhooks(data: Any) -> list[str]:
    """Parse the webhooks entry (string or list) from config data."""
    if data is None:
        return []
    if isinstance(data, (list, tuple)):
        data = [_resolve_value(w) for w in data]
    else:
        data = _resolve_value(data)
    return normalize_webhooks(data)


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object

    Raises:
        InvalidWebhookError: If webhooks is not a string or list of strings
    """
    token = _resolve_value(data.get("token"))
    if isinstance(token, str) and token.startswith("${"):
        # Unresolved placeholder; never send it as a token
        token = None

    client = ClientConfig(
        token=token or None,
        timeout=int(data.get("timeout", DEFAULT_TIMEOUT_MS)),
        max_attempts=int(data.get("max_attempts", DEFAULT_MAX_ATTEMPTS)),
        url=data.get("url", DEFAULT_API_URL),
    )

    return Config(
        client=client,
        webhooks=_parse_webhooks(data.get("webhooks")),
    )


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses SLACK_RELAY_CONFIG env var or default.

    Returns:
        Parsed Config object

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
    """
    explicit = config_path is not None
    if config_path is None:
        config_path = os.environ.get("SLACK_RELAY_CONFIG", DEFAULT_CONFIG_PATH)

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {path}")
        logger.warning("Config file not found: %s, using defaults", path)
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return Config()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: %d webhook(s), token %s",
        len(config.webhooks),
        "set" if config.client.token else "not set",
    )

    return config


def load_config_from_env() -> Config:
    """Load configuration from environment variables.

    Environment variables:
        SLACK_TOKEN: API token (falls back to API_KEY)
        SLACK_WEBHOOKS: Comma-separated webhook URLs
                        (falls back to WEBHOOK_ARRAY, then WEBHOOK_SINGLE)
        SLACK_TIMEOUT_MS: Request timeout in milliseconds
        SLACK_MAX_ATTEMPTS: Attempts per request
        SLACK_API_URL: Web API base URL

    Returns:
        Config object from environment
    """
    token = os.environ.get("SLACK_TOKEN") or os.environ.get("API_KEY")

    webhooks_str = (
        os.environ.get("SLACK_WEBHOOKS")
        or os.environ.get("WEBHOOK_ARRAY")
        or os.environ.get("WEBHOOK_SINGLE")
        or ""
    )
    webhooks = _split_list(webhooks_str)

    if not webhooks:
        logger.warning("SLACK_WEBHOOKS not set")

    client = ClientConfig(
        token=token or None,
        timeout=int(os.environ.get("SLACK_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS))),
        max_attempts=int(os.environ.get("SLACK_MAX_ATTEMPTS", str(DEFAULT_MAX_ATTEMPTS))),
        url=os.environ.get("SLACK_API_URL", DEFAULT_API_URL),
    )

    return Config(client=client, webhooks=webhooks)
