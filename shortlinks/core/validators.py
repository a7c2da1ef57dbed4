"""
Input Validators

This module provides the validation helpers used by the request schemas
and by the validation error handler.

Security Considerations:
- Only http and https targets are accepted, so a redirect can never point
  at javascript:, data:, file: or similar schemes
- Length limits prevent oversized rows and DoS attacks
"""

from typing import Any, Iterable
from urllib.parse import urlparse

MAX_URL_LENGTH = 2048  # RFC 7230 practical limit
MAX_NAME_LENGTH = 255

ALLOWED_SCHEMES = {"http", "https"}

# Location prefixes FastAPI adds to validation errors
_LOCATION_PREFIXES = {"body", "path", "query"}


def is_valid_url(url: str) -> bool:
    """
    Validate that a string is a well-formed absolute http(s) URL.

    Checks that URL uses http/https, has a host, and that the host is either
    localhost or contains a dot.

    Args:
        url: The URL string to validate

    Returns:
        True if valid, False otherwise
    """
    if not url or not isinstance(url, str):
        return False

    if len(url) > MAX_URL_LENGTH:
        return False

    if any(char.isspace() for char in url):
        return False

    try:
        result = urlparse(url)
        hostname = result.hostname
    except ValueError:
        return False

    if not result.scheme or not result.netloc or not hostname:
        return False

    if result.scheme.lower() not in ALLOWED_SCHEMES:
        return False

    if hostname != "localhost" and "." not in hostname:
        return False

    if hostname.startswith(".") or hostname.endswith("."):
        return False

    return True


def format_validation_errors(errors: Iterable[dict[str, Any]]) -> list[str]:
    """
    Turn Pydantic/FastAPI error dicts into human-readable field complaints.

    The leading location segment ("body", "path") is dropped so messages read
    as "name: String should have at least 1 character". An error on the whole
    body (e.g. no body sent) is reported against "body".

    Args:
        errors: Iterable of error dicts as returned by ``exc.errors()``

    Returns:
        One message per error, in the order they were reported
    """
    messages = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ())]
        if len(location) > 1 and location[0] in _LOCATION_PREFIXES:
            location = location[1:]
        field = ".".join(location) or "body"
        messages.append(f"{field}: {error.get('msg', 'Invalid value')}")
    return messages
