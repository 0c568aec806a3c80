"""HTTP response records - Pure data structures."""

import json
from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class ResponseRecord:
    """Normalized result of one HTTP call.

    Attributes:
        status_code: HTTP status code
        headers: Response headers (case-insensitive when from a transport)
        body: Parsed JSON when the body was JSON, otherwise the raw text
    """
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Any = None

    @property
    def ok(self) -> bool:
        """True for 2xx status codes."""
        return 200 <= self.status_code < 300


def try_parse_json(body: Any) -> Any:
    """Parse a string body as JSON, returning it unchanged on failure.

    Pure function. Non-string bodies are passed through.
    """
    if not isinstance(body, str):
        return body
    try:
        return json.loads(body)
    except ValueError:
        return body
