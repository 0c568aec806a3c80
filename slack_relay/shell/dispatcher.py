"""Request dispatch - Imperative Shell.

Shapes webhook posts and Web API calls into requests, sends them
through a transport and normalizes the responses. Blocking transport
calls run in worker threads so webhook fan-out is concurrent.
"""

import asyncio
import dataclasses
import logging
from typing import Any, Mapping

from slack_relay.core.response import ResponseRecord, try_parse_json
from slack_relay.shell.transport import ApiRequest, RetryingTransport


logger = logging.getLogger(__name__)


# The one API method sent as a multipart POST instead of a GET
UPLOAD_METHOD = "files.upload"


def _encode_argument(value: Any) -> Any:
    """Spell booleans the way the Slack API expects them."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def _normalize(record: ResponseRecord) -> ResponseRecord:
    return dataclasses.replace(record, body=try_parse_json(record.body))


async def _send(transport: RetryingTransport, request: ApiRequest) -> ResponseRecord:
    record = await asyncio.to_thread(transport.send, request)
    return _normalize(record)


def build_api_request(
    base_url: str,
    method: str,
    options: Mapping[str, Any] | None = None,
    token: str | None = None,
) -> ApiRequest:
    """Build the request for a Web API method call.

    Pure function. The caller's options are copied, never modified.

    Args:
        base_url: API root the method name is appended to
        method: API method name, e.g. "chat.postMessage"
        options: Method arguments
        token: API token merged in under "token" when set

    Returns:
        ApiRequest ready for the transport
    """
    arguments = {k: _encode_argument(v) for k, v in (options or {}).items()}
    if token is not None:
        arguments["token"] = token

    url = base_url + method

    if method == UPLOAD_METHOD:
        form = {k: v for k, v in arguments.items() if v is not None}
        return ApiRequest(method="POST", url=url, form=form)

    return ApiRequest(method="GET", url=url, params=arguments)


async def send_webhooks(
    transport: RetryingTransport,
    payload: dict[str, Any],
    webhook_urls: list[str],
) -> list[ResponseRecord]:
    """POST the same payload to every webhook concurrently.

    The first failure is raised once it happens; calls still in flight
    are left to finish and their results are dropped.

    Args:
        transport: Transport to send through
        payload: Webhook payload
        webhook_urls: Target URLs

    Returns:
        One ResponseRecord per URL, in URL order

    Raises:
        TransportError: If any webhook call fails
    """
    logger.info("Sending message to %d webhook(s)", len(webhook_urls))

    calls = [
        ApiRequest(method="POST", url=url, json=payload)
        for url in webhook_urls
    ]
    responses = await asyncio.gather(*(_send(transport, r) for r in calls))
    return list(responses)


async def call_api(
    transport: RetryingTransport,
    base_url: str,
    method: str,
    options: Mapping[str, Any] | None = None,
    token: str | None = None,
) -> ResponseRecord:
    """Call a Slack Web API method.

    Raises:
        TransportError: If the call fails
    """
    request = build_api_request(base_url, method, options, token)
    logger.info("Calling Slack API method %s (%s)", method, request.method)
    return await _send(transport, request)
