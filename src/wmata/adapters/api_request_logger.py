"""Utility for logging API requests when WMATA_LOG_REQUESTS is enabled."""

import json
import logging
import os
from collections.abc import Mapping, Sequence

logger = logging.getLogger(__name__)


def should_log_requests() -> bool:
    """Check if request logging is enabled via WMATA_LOG_REQUESTS environment variable."""
    return os.getenv("WMATA_LOG_REQUESTS", "").lower() == "true"


def _build_url_with_params(url: str, params: Sequence[tuple[str, str]] | None) -> str:
    """Build full URL with query parameters, keeping their order."""
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in params)
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def _redact_sensitive_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Redact credentials from logging."""
    sensitive_keys = {"api_key", "authorization", "cookie", "x-api-key"}
    return {k: "***REDACTED***" if k.lower() in sensitive_keys else v for k, v in headers.items()}


def log_api_request(
    method: str,
    url: str,
    params: Sequence[tuple[str, str]] | None = None,
    headers: Mapping[str, str] | None = None,
) -> None:
    """Log API request details if WMATA_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET).
        url: Request URL.
        params: Ordered query parameters (optional).
        headers: Request headers (optional, the API key is always redacted).
    """
    if not should_log_requests():
        return

    full_url = _build_url_with_params(url, params)
    log_parts = [f"{method} {full_url}"]

    if headers:
        safe_headers = _redact_sensitive_headers(headers)
        log_parts.append(f"Headers: {json.dumps(safe_headers, indent=2)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
