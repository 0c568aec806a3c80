"""Slack Client - Imperative Shell.

The object users construct and call. It owns a webhook set and the
client settings, and delegates payload building to the core and HTTP
work to the dispatcher.
"""

import logging
from typing import Any, Callable, Mapping

from slack_relay.core.config import (
    DEFAULT_API_URL,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_TIMEOUT_MS,
    ClientConfig,
    Config,
)
from slack_relay.core.payload import MessageOptions, build_payload
from slack_relay.core.response import ResponseRecord
from slack_relay.core.webhooks import WebhookSet
from slack_relay.shell.dispatcher import call_api, send_webhooks
from slack_relay.shell.transport import RetryingTransport


logger = logging.getLogger(__name__)


Callback = Callable[[BaseException | None, Any], Any]


def _callback_if_valid(
    callback: Callback | None,
    error: BaseException | None,
    result: Any = None,
) -> None:
    if callable(callback):
        callback(error, result)


class SlackClient:
    """Client for Slack incoming webhooks and the Slack Web API.

    Webhook mutators return the client so calls can be chained:

        client.add_webhooks(url_a).remove_webhooks(url_b)

    Mutating webhooks while a webhook() call is in flight is not
    synchronized; each call works on the URLs stored when it started.
    """

    def __init__(
        self,
        token: str | None = None,
        timeout: int = DEFAULT_TIMEOUT_MS,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        webhooks: str | list[str] | tuple[str, ...] | None = None,
        url: str = DEFAULT_API_URL,
        transport: RetryingTransport | None = None,
    ) -> None:
        """Initialize Slack client.

        Args:
            token: Slack API token for api() calls
            timeout: Request timeout in milliseconds
            max_attempts: Attempts per request before giving up
            webhooks: Webhook URL or list of URLs
            url: Slack Web API base URL
            transport: Transport override, mostly for tests

        Raises:
            InvalidWebhookError: If webhooks is not a string or list of strings
        """
        self._config = ClientConfig(
            token=token,
            timeout=timeout,
            max_attempts=max_attempts,
            url=url,
        )
        self._webhooks = WebhookSet(webhooks)
        self._transport = transport or RetryingTransport(
            timeout=timeout,
            max_attempts=max_attempts,
            retry_delay=0,
        )

    @classmethod
    def from_config(
        cls,
        config: Config,
        transport: RetryingTransport | None = None,
    ) -> "SlackClient":
        """Create a client from loaded application configuration."""
        return cls(
            token=config.client.token,
            timeout=config.client.timeout,
            max_attempts=config.client.max_attempts,
            webhooks=list(config.webhooks),
            url=config.client.url,
            transport=transport,
        )

    @property
    def config(self) -> ClientConfig:
        """Settings fixed at construction."""
        return self._config

    @property
    def webhooks(self) -> list[str]:
        """Copy of the stored webhook URLs."""
        return self._webhooks.snapshot()

    def add_webhooks(self, webhooks: str | list[str] | tuple[str, ...]) -> "SlackClient":
        """Add a webhook URL or a list of URLs.

        Raises:
            InvalidWebhookError: If the input is invalid; nothing is added
        """
        self._webhooks.add(webhooks)
        return self

    def set_webhooks(self, webhooks: str | list[str] | tuple[str, ...]) -> "SlackClient":
        """Replace all stored webhooks.

        Raises:
            InvalidWebhookError: If the input is invalid; the stored
                webhooks are left empty
        """
        self._webhooks.replace(webhooks)
        return self

    def remove_webhooks(self, webhooks: Any) -> "SlackClient":
        """Remove a webhook URL or a list of URLs, if stored."""
        self._webhooks.remove(webhooks)
        return self

    async def webhook(
        self,
        options: MessageOptions | Mapping[str, Any],
        callback: Callback | None = None,
    ) -> list[ResponseRecord]:
        """Send a message to every stored webhook.

        Args:
            options: Message options
            callback: Optional callable invoked as callback(error, responses)

        Returns:
            One ResponseRecord per webhook, in storage order

        Raises:
            TransportError: If any webhook call fails
        """
        payload = build_payload(options)
        try:
            responses = await send_webhooks(
                self._transport,
                payload,
                self._webhooks.snapshot(),
            )
        except Exception as e:
            logger.error("Webhook dispatch failed: %s", e)
            _callback_if_valid(callback, e)
            raise
        _callback_if_valid(callback, None, responses)
        return responses

    async def api(
        self,
        method: str,
        options: Mapping[str, Any] | Callback | None = None,
        callback: Callback | None = None,
    ) -> ResponseRecord:
        """Call a Slack Web API method.

        The options argument may be the callback itself when the method
        takes no arguments.

        Args:
            method: API method name, e.g. "api.test"
            options: Method arguments
            callback: Optional callable invoked as callback(error, response)

        Returns:
            ResponseRecord for the call

        Raises:
            TransportError: If the call fails
        """
        if callable(options):
            callback = options
            options = None

        try:
            response = await call_api(
                self._transport,
                self._config.url,
                method,
                options,
                self._config.token,
            )
        except Exception as e:
            logger.error("Slack API call %s failed: %s", method, e)
            _callback_if_valid(callback, e)
            raise
        _callback_if_valid(callback, None, response)
        return response
