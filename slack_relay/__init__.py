"""Slack incoming-webhook and Web API client.

Usage:

    client = SlackClient(webhooks=["https://hooks.slack.com/services/..."])
    responses = asyncio.run(client.webhook({"text": "Deploy finished"}))
"""

from slack_relay.core.config import ClientConfig, Config
from slack_relay.core.payload import MessageOptions, build_payload
from slack_relay.core.response import ResponseRecord
from slack_relay.core.webhooks import InvalidWebhookError
from slack_relay.shell.slack_client import SlackClient
from slack_relay.shell.transport import RetryingTransport, TransportError

__all__ = [
    "ClientConfig",
    "Config",
    "InvalidWebhookError",
    "MessageOptions",
    "ResponseRecord",
    "RetryingTransport",
    "SlackClient",
    "TransportError",
    "build_payload",
]
