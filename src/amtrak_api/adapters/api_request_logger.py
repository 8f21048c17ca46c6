"""Utility for logging API requests when AMTRAK_API_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

LOG_REQUESTS_ENV = "AMTRAK_API_LOG_REQUESTS"


def should_log_requests() -> bool:
    """Check if request logging is enabled via the AMTRAK_API_LOG_REQUESTS environment variable."""
    return os.getenv(LOG_REQUESTS_ENV, "").lower() == "true"


def _redact_sensitive_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact sensitive headers from logging."""
    sensitive_keys = {"authorization", "cookie", "x-api-key"}
    return {k: "***REDACTED***" if k.lower() in sensitive_keys else v for k, v in headers.items()}


def log_api_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    enabled: bool = False,
) -> None:
    """Log API request details if enabled explicitly or through the environment.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL.
        headers: Request headers (optional, sensitive headers are redacted).
        enabled: Log regardless of the environment switch.
    """
    if not (enabled or should_log_requests()):
        return

    log_parts = [f"{method} {url}"]

    if headers:
        safe_headers = _redact_sensitive_headers(headers)
        log_parts.append(f"Headers: {json.dumps(safe_headers, indent=2)}")

    logger.info("API Request:\n" + "\n".join(log_parts))


def log_api_response(url: str, status: int, body: bytes, enabled: bool = False) -> None:
    """Log the status and size of a response under the same switch as requests."""
    if not (enabled or should_log_requests()):
        return

    logger.info(f"API Response: {status} from {url} ({len(body)} bytes)")


def describe_payload(payload: Any) -> str:
    """Describe the top-level shape of a decoded JSON payload for log messages."""
    if isinstance(payload, dict):
        return f"object with {len(payload)} key(s)"
    if isinstance(payload, list):
        return f"array with {len(payload)} item(s)"
    return type(payload).__name__
