"""Redaction of credentials and bulky payloads in debug output."""

import json
from collections.abc import Mapping
from typing import Any

SENSITIVE_HEADERS: frozenset[str] = frozenset({
    "api-key",
    "authorization",
    "cookie",
    "proxy-authorization",
})

REDACTED_VALUE = "[REDACTED]"
BODY_PREVIEW_MAX_LENGTH = 200


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of ``headers`` with credential values replaced.

    Header names are matched case-insensitively. The input is never mutated.
    """
    return {
        name: REDACTED_VALUE if name.lower() in SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def summarize_body(body: Any, *, max_length: int = BODY_PREVIEW_MAX_LENGTH) -> str:
    """Render a request body as a single debug line.

    Uploads carry whole files as base64 text, so anything longer than
    ``max_length`` characters is cut and suffixed with its full size.

    Args:
        body: The JSON payload about to be sent (or None).
        max_length: Maximum number of characters kept from the rendering.

    Returns:
        A one-line preview of the body.
    """
    if body is None:
        return "<no body>"
    rendered = json.dumps(body, default=str, separators=(",", ":"))
    if len(rendered) <= max_length:
        return rendered
    return f"{rendered[:max_length]}... ({len(rendered)} chars)"
