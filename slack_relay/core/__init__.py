"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Webhook validation and storage
- Message payload building
- Response body normalization
- Configuration models and validation

All functions here are deterministic and have no I/O.
"""

from slack_relay.core.webhooks import (
    InvalidWebhookError,
    WebhookSet,
    normalize_webhooks,
    validate_webhooks,
)
from slack_relay.core.payload import MessageOptions, build_payload, detect_icon
from slack_relay.core.response import ResponseRecord, try_parse_json
from slack_relay.core.config import ClientConfig, Config, validate_config

__all__ = [
    # Webhooks
    "InvalidWebhookError",
    "WebhookSet",
    "normalize_webhooks",
    "validate_webhooks",
    # Payload
    "MessageOptions",
    "build_payload",
    "detect_icon",
    # Response
    "ResponseRecord",
    "try_parse_json",
    # Config
    "ClientConfig",
    "Config",
    "validate_config",
]
