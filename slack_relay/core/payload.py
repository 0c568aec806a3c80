"""Message payload building - Pure functions.

This module turns caller-supplied message options into the JSON
payload Slack incoming webhooks expect. All functions are pure.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping


DEFAULT_RESPONSE_TYPE = "ephemeral"
DEFAULT_CHANNEL = "#general"

# camelCase names accepted for compatibility with the JavaScript client
_OPTION_ALIASES = {
    "iconEmoji": "icon_emoji",
    "userName": "username",
    "responseType": "response_type",
    "linkNames": "link_names",
}


@dataclass(frozen=True)
class MessageOptions:
    """Options describing a single webhook message.

    Attributes:
        channel: Target channel, e.g. "#general"
        text: Message text
        username: Bot display name
        icon_emoji: Emoji name (":metal:") or icon image URL
        attachments: Legacy message attachments
        response_type: "ephemeral" or "in_channel"
        link_names: Whether Slack should link @names and #channels
    """
    channel: str | None = None
    text: str | None = None
    username: str | None = None
    icon_emoji: str | None = None
    attachments: list[dict[str, Any]] | None = None
    response_type: str | None = None
    link_names: bool | int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MessageOptions":
        """Build options from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = _OPTION_ALIASES.get(key, key)
            if name in known:
                values[name] = value
        return cls(**values)


def detect_icon(icon: str | None) -> tuple[str, str]:
    """Pick the payload key for an icon value.

    Pure function.

    Args:
        icon: Emoji name, image URL, or None

    Returns:
        Tuple of (payload key, value)
    """
    if not icon:
        return "icon_emoji", ""
    if icon.startswith("http"):
        return "icon_url", icon
    return "icon_emoji", icon


def build_payload(options: MessageOptions | Mapping[str, Any]) -> dict[str, Any]:
    """Build a Slack webhook payload.

    Pure function. Absent optional fields are left out of the payload.

    Args:
        options: Message options, as a dataclass or a plain mapping

    Returns:
        JSON-serializable payload dict
    """
    if not isinstance(options, MessageOptions):
        options = MessageOptions.from_dict(options)

    payload: dict[str, Any] = {
        "response_type": options.response_type or DEFAULT_RESPONSE_TYPE,
        "channel": options.channel or DEFAULT_CHANNEL,
        "text": options.text or "",
    }

    if options.username is not None:
        payload["username"] = options.username
    if options.attachments is not None:
        payload["attachments"] = options.attachments
    if options.link_names is not None:
        payload["link_names"] = options.link_names

    key, value = detect_icon(options.icon_emoji)
    payload[key] = value

    return payload
