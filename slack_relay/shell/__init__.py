"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- Retrying HTTP transport (requests)
- Webhook and Web API dispatch
- The SlackClient facade
- Configuration loading (environment/files)

Keep this layer thin and simple. All business logic should be in core.
"""

from slack_relay.shell.transport import ApiRequest, RetryingTransport, TransportError
from slack_relay.shell.slack_client import SlackClient
from slack_relay.shell.config_loader import load_config, load_config_from_env

__all__ = [
    "ApiRequest",
    "RetryingTransport",
    "TransportError",
    "SlackClient",
    "load_config",
    "load_config_from_env",
]
