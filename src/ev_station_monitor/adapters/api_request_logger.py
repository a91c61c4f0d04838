"""Logging of outgoing station requests, enabled with EVSM_LOG_REQUESTS."""

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Return a copy of ``headers`` with credential-bearing values masked."""
    return {k: "***REDACTED***" if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()}


def log_api_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    enabled: bool = False,
) -> None:
    """Log an outgoing request when request logging is enabled.

    Args:
        method: HTTP method.
        url: Request URL.
        headers: Request headers; sensitive values are redacted.
        enabled: Whether request logging is switched on.
    """
    if not enabled:
        return

    message = f"API Request: {method} {url}"
    if headers:
        message += f"\nHeaders: {json.dumps(redact_headers(headers), indent=2)}"
    logger.info(message)


def log_api_response(status: int, url: str, body: Any = None, enabled: bool = False) -> None:
    """Log the status (and a prefix of the body) of a station response."""
    if not enabled:
        return

    text = body if isinstance(body, str) else json.dumps(body, default=str)
    logger.info(f"API Response: {status} from {url}: {text[:500]}")
