"""Keeping Watson credentials out of logs and out of service URLs."""

from __future__ import annotations

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Mapping
from urllib.parse import urlsplit


# Basic credentials, IAM bearer tokens and the legacy Watson token header.
CREDENTIAL_HEADERS = frozenset(
    {
        "authorization",
        "proxy-authorization",
        "x-watson-authorization-token",
    }
)

REDACTED = "[REDACTED]"


def sanitize_headers(headers: Mapping[str, str]) -> dict[str, str]:
    return {key: REDACTED if key.lower() in CREDENTIAL_HEADERS else value for key, value in headers.items()}


def validate_base_url(url: str, *, allow_http: bool = False) -> None:
    """Check a Watson service URL such as ``https://gateway.watsonplatform.net/assistant/api``.

    The URL is a prefix that operation paths are appended to, so it may not carry
    a query or fragment. Credentials belong in ``username``/``password``, not in
    the URL. Plain HTTP is accepted for loopback hosts or with ``allow_http``.
    """
    if "\x00" in url:
        raise ValueError("Invalid base_url")
    parts = urlsplit(url)
    if parts.scheme not in {"http", "https"}:
        raise ValueError(f"Unsupported base_url scheme: {parts.scheme or '(none)'}")
    if not parts.hostname:
        raise ValueError("base_url must include scheme and host")
    if parts.username is not None or parts.password is not None:
        raise ValueError("base_url must not embed credentials; pass username and password instead")
    if parts.query or parts.fragment:
        raise ValueError("base_url must not have a query string or fragment")
    if parts.scheme == "http" and not allow_http and parts.hostname.lower() not in {"localhost", "127.0.0.1", "::1"}:
        raise ValueError("Non-HTTPS base_url is not allowed without allow_http=True")


def parse_retry_after(raw: str | None) -> float | None:
    """Seconds to wait according to a 429 response's Retry-After header."""
    value = (raw or "").strip()
    if not value:
        return None
    try:
        return max(0.0, float(value))
    except ValueError:
        when = _http_date(value)
    if when is None:
        return None
    return max(0.0, (when - datetime.now(timezone.utc)).total_seconds())


def _http_date(value: str) -> datetime | None:
    try:
        when = parsedate_to_datetime(value)
    except (ValueError, TypeError, OverflowError):
        return None
    if when is None:
        return None
    if when.tzinfo is None:
        return when.replace(tzinfo=timezone.utc)
    return when.astimezone(timezone.utc)
