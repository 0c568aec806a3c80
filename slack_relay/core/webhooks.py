"""Webhook set management - Pure functions and data.

This module validates and stores incoming-webhook URLs. Nothing here
performs I/O; dispatching to the stored URLs is handled by the shell.
"""

from typing import Any


INVALID_WEBHOOK_MESSAGE = (
    "SlackClient can only handle strings or lists of strings. You provided: "
)


class InvalidWebhookError(ValueError):
    """Raised when a webhook value is not a string or a list of strings.

    Attributes:
        value: The offending input
    """

    def __init__(self, value: Any) -> None:
        super().__init__(f"{INVALID_WEBHOOK_MESSAGE}{value!r}")
        self.value = value


def _is_url_string(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def validate_webhooks(candidate: Any) -> bool:
    """Check that a candidate is a webhook URL or a sequence of them.

    Pure function. An empty list or tuple is valid.

    Args:
        candidate: Value to check

    Returns:
        True if the value is valid

    Raises:
        InvalidWebhookError: If the value is anything else
    """
    if isinstance(candidate, (list, tuple)):
        for webhook in candidate:
            if not _is_url_string(webhook):
                raise InvalidWebhookError(webhook)
        return True

    if _is_url_string(candidate):
        return True

    raise InvalidWebhookError(candidate)


def normalize_webhooks(candidate: Any) -> list[str]:
    """Validate and resolve a webhook input into a fresh list of URLs.

    Pure function. A single string becomes a one-element list; a
    sequence is copied so later changes to the caller's list do not
    leak in.

    Raises:
        InvalidWebhookError: If the value is not valid
    """
    validate_webhooks(candidate)
    if isinstance(candidate, str):
        return [candidate]
    return list(candidate)


class WebhookSet:
    """Ordered collection of webhook URLs.

    Duplicates are allowed and each copy receives its own dispatch.
    """

    def __init__(self, webhooks: str | list[str] | tuple[str, ...] | None = None) -> None:
        self._urls: list[str] = []
        if webhooks is not None:
            self._urls = normalize_webhooks(webhooks)

    def __len__(self) -> int:
        return len(self._urls)

    def __iter__(self):
        return iter(list(self._urls))

    def snapshot(self) -> list[str]:
        """Return a copy of the stored URLs."""
        return list(self._urls)

    def add(self, webhooks: str | list[str] | tuple[str, ...]) -> "WebhookSet":
        """Append one URL or a sequence of URLs.

        Validation happens before anything is appended, so an invalid
        input leaves the set unchanged.

        Raises:
            InvalidWebhookError: If the input is not valid
        """
        self._urls.extend(normalize_webhooks(webhooks))
        return self

    def replace(self, webhooks: str | list[str] | tuple[str, ...]) -> "WebhookSet":
        """Clear the set, then add the given URLs.

        The set is cleared before validation: on invalid input it stays
        empty.

        Raises:
            InvalidWebhookError: If the input is not valid
        """
        self._urls = []
        return self.add(webhooks)

    def remove(self, webhooks: Any) -> "WebhookSet":
        """Remove every entry equal to the given URL (or to any given URL).

        Values that are not stored, including non-strings, are ignored.
        """
        if isinstance(webhooks, (list, tuple)):
            unwanted = [w for w in webhooks if isinstance(w, str)]
        elif isinstance(webhooks, str):
            unwanted = [webhooks]
        else:
            return self

        self._urls = [url for url in self._urls if url not in unwanted]
        return self
