#!/usr/bin/env python3
"""Send a test message to the configured webhooks and ping the Web API.

⚠️  WARNING: This script posts REAL messages to the configured channels!

Usage:
    # Dry run (print the payload, no sends)
    python scripts/send_test_message.py --dry-run

    # Send to the configured webhooks
    python scripts/send_test_message.py --channel "#development" --text "Hello"

    # Also call api.test with the configured token
    python scripts/send_test_message.py --api-test

Environment:
    SLACK_RELAY_CONFIG: Path to a YAML config file
    SLACK_WEBHOOKS / SLACK_TOKEN: Used when no config file is given
    LOG_LEVEL: Logging level (default INFO)
"""

import argparse
import asyncio
import json
import logging
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from slack_relay.core.config import Config, validate_config
from slack_relay.core.payload import MessageOptions, build_payload
from slack_relay.shell.config_loader import load_config, load_config_from_env
from slack_relay.shell.slack_client import SlackClient
from slack_relay.shell.transport import TransportError

log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)


def get_config() -> Config:
    """Load configuration from file or environment."""
    if os.environ.get("SLACK_RELAY_CONFIG"):
        return load_config()
    if os.environ.get("SLACK_WEBHOOKS") or os.environ.get("WEBHOOK_SINGLE"):
        return load_config_from_env()
    return load_config()


async def run(client: SlackClient, options: MessageOptions, api_test: bool) -> bool:
    """Send the message, then optionally call api.test."""
    responses = await client.webhook(options)
    for i, response in enumerate(responses):
        logger.info("  Webhook %d -> HTTP %d", i + 1, response.status_code)

    if not all(r.ok for r in responses):
        logger.error("  ✗ At least one webhook rejected the message")
        return False
    logger.info("  ✓ Webhook message sent to %d webhook(s)", len(responses))

    if api_test:
        response = await client.api("api.test")
        if isinstance(response.body, dict) and response.body.get("ok"):
            logger.info("  ✓ api.test succeeded")
        else:
            logger.error("  ✗ api.test returned no ok in body: %s", response.body)
            return False

    return True


def main() -> int:
    parser = argparse.ArgumentParser(description="Send a test Slack message")
    parser.add_argument("--channel", default="#development", help="Target channel")
    parser.add_argument("--text", default="You cannot kill the battery!", help="Message text")
    parser.add_argument("--username", default="Metal bot", help="Bot display name")
    parser.add_argument("--icon", default=":metal:", help="Emoji name or icon URL")
    parser.add_argument("--api-test", action="store_true", help="Also call api.test")
    parser.add_argument("--dry-run", action="store_true", help="Print payload without sending")
    args = parser.parse_args()

    options = MessageOptions(
        channel=args.channel,
        text=args.text,
        username=args.username,
        icon_emoji=args.icon,
    )

    if args.dry_run:
        print(json.dumps(build_payload(options), indent=2))
        return 0

    config = get_config()
    result = validate_config(config)
    for error in result.errors:
        log = logger.error if error.severity == "error" else logger.warning
        log("Config %s: %s", error.field, error.message)
    if not result.valid:
        return 1

    client = SlackClient.from_config(config)

    try:
        ok = asyncio.run(run(client, options, args.api_test))
    except TransportError as e:
        logger.error("  ✗ Request failed: %s", e)
        return 1

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
