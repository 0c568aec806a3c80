"""Retrying HTTP transport - Imperative Shell.

This module performs the actual HTTP I/O with a bounded number of
attempts. Deciding what to send and how to interpret the result lives
in the dispatcher and the core module.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlparse

import requests
from requests.structures import CaseInsensitiveDict

from slack_relay.core.config import DEFAULT_MAX_ATTEMPTS, DEFAULT_TIMEOUT_MS
from slack_relay.core.response import ResponseRecord


logger = logging.getLogger(__name__)


class TransportError(Exception):
    """Raised when a request still fails after its last attempt.

    The underlying requests exception is available as __cause__.

    Attributes:
        url: Requested URL
        attempts: Number of attempts made
    """

    def __init__(self, url: str, attempts: int, reason: str = "") -> None:
        message = f"Request to {_host(url)} failed after {attempts} attempt(s)"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.url = url
        self.attempts = attempts


@dataclass(frozen=True)
class ApiRequest:
    """Description of one outbound HTTP request.

    Attributes:
        method: HTTP method
        url: Full request URL
        json: JSON body (webhook posts)
        params: Query string parameters
        form: Multipart form fields
    """
    method: str
    url: str
    json: Any = None
    params: dict[str, Any] = field(default_factory=dict)
    form: dict[str, Any] = field(default_factory=dict)


def _host(url: str) -> str:
    return urlparse(url).netloc or url


def _form_part(value: Any) -> Any:
    """Convert a form value into a requests multipart part."""
    if isinstance(value, tuple) or hasattr(value, "read"):
        return value
    if isinstance(value, bytes):
        return (None, value)
    return (None, str(value))


class RetryingTransport:
    """Sends requests, retrying network errors and 5xx responses.

    Non-2xx responses are returned, not raised. Only a network failure
    on the last attempt becomes a TransportError.
    """

    def __init__(
        self,
        timeout: int = DEFAULT_TIMEOUT_MS,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        retry_delay: int = 0,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            timeout: Per-attempt timeout in milliseconds
            max_attempts: Total attempts per request
            retry_delay: Pause between attempts in milliseconds
            session: Optional requests session to send through
        """
        self.timeout = timeout
        self.max_attempts = max(1, max_attempts)
        self.retry_delay = retry_delay
        self.session = session

    def _request(self, request: ApiRequest) -> requests.Response:
        kwargs: dict[str, Any] = {
            "params": request.params or None,
            "timeout": self.timeout / 1000,
        }
        if request.json is not None:
            kwargs["json"] = request.json
        if request.form:
            kwargs["files"] = {k: _form_part(v) for k, v in request.form.items()}

        http = self.session if self.session is not None else requests
        return http.request(request.method, request.url, **kwargs)

    def send(self, request: ApiRequest) -> ResponseRecord:
        """Send a request, retrying up to max_attempts times.

        This method performs HTTP I/O.

        Args:
            request: Request to send

        Returns:
            ResponseRecord with the raw response text as body

        Raises:
            TransportError: If the last attempt failed with a network error
        """
        last_error: requests.RequestException | None = None

        for attempt in range(1, self.max_attempts + 1):
            try:
                response = self._request(request)
            except requests.RequestException as e:
                last_error = e
                logger.warning(
                    "%s %s failed (attempt %d/%d): %s",
                    request.method,
                    _host(request.url),
                    attempt,
                    self.max_attempts,
                    e.__class__.__name__,
                )
            else:
                if response.status_code < 500 or attempt == self.max_attempts:
                    return ResponseRecord(
                        status_code=response.status_code,
                        headers=CaseInsensitiveDict(response.headers),
                        body=response.text,
                    )
                logger.warning(
                    "%s %s returned %d (attempt %d/%d)",
                    request.method,
                    _host(request.url),
                    response.status_code,
                    attempt,
                    self.max_attempts,
                )

            if attempt < self.max_attempts and self.retry_delay > 0:
                time.sleep(self.retry_delay / 1000)

        logger.error(
            "%s %s gave up after %d attempt(s)",
            request.method,
            _host(request.url),
            self.max_attempts,
        )
        raise TransportError(
            request.url,
            self.max_attempts,
            last_error.__class__.__name__ if last_error else "",
        ) from last_error
