"""Error taxonomy for the EarningsFeed client.

Every failed call raises exactly one subclass of :class:`EarningsFeedError`.
HTTP statuses are classified before the error body is read, so a malformed
body still produces the right kind with a fallback message.
"""

import re
from typing import Any

import httpx

RATE_LIMIT_RESET_HEADER = "X-RateLimit-Reset"
MAX_RESET_TIMESTAMP = 2**64 - 1

_DIGITS = re.compile(r"\+?[0-9]+")


class EarningsFeedError(Exception):
    """Base exception for EarningsFeed client errors."""

    kind = "error"


class AuthenticationError(EarningsFeedError):
    """Raised on HTTP 401: the API key is missing or invalid."""

    kind = "authentication"

    def __init__(self) -> None:
        super().__init__("authentication failed: invalid or missing API key")


class NotFoundError(EarningsFeedError):
    """Raised on HTTP 404."""

    kind = "not_found"

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"resource not found: {path}")


class ValidationError(EarningsFeedError):
    """Raised on HTTP 400 with the server's validation message."""

    kind = "validation"

    def __init__(self, message: str = "Invalid request") -> None:
        self.message = message
        super().__init__(f"validation error: {message}")


class RateLimitError(EarningsFeedError):
    """Raised on HTTP 429.

    ``reset_at`` is the Unix timestamp from the ``X-RateLimit-Reset`` header,
    or ``None`` when the header is missing or unparseable.
    """

    kind = "rate_limit"

    def __init__(self, reset_at: int | None = None) -> None:
        self.reset_at = reset_at
        super().__init__(f"rate limit exceeded (resets at: {reset_at})")


class APIError(EarningsFeedError):
    """Raised for any other non-2xx status."""

    kind = "api"

    def __init__(self, status: int, message: str = "Unknown error", code: str | None = None) -> None:
        self.status = status
        self.message = message
        self.code = code
        super().__init__(f"API error ({status}): {message}")


class TransportError(EarningsFeedError):
    """Raised when the request never produced an HTTP response."""

    kind = "transport"

    def __init__(self, cause: BaseException, message: str | None = None) -> None:
        self.cause = cause
        super().__init__(message or f"HTTP error: {cause}")


class RequestTimeoutError(TransportError):
    """Raised when the configured per-request timeout is exceeded."""

    def __init__(self, cause: BaseException, timeout: float | None) -> None:
        self.timeout = timeout
        super().__init__(cause, f"request timeout after {timeout}s")


class SerializationError(EarningsFeedError):
    """Raised when a successful response body cannot be decoded."""

    kind = "serialization"

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"JSON error: {cause}")


class ConfigError(EarningsFeedError):
    """Raised for invalid client configuration."""

    kind = "config"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"configuration error: {message}")


def parse_reset_header(value: str | None) -> int | None:
    """Parse an ``X-RateLimit-Reset`` value into a Unix timestamp.

    Returns None for a missing header, anything other than ASCII digits,
    or a value above MAX_RESET_TIMESTAMP.
    """
    if value is None or not _DIGITS.fullmatch(value):
        return None
    timestamp = int(value)
    if timestamp > MAX_RESET_TIMESTAMP:
        return None
    return timestamp


def _error_body(response: httpx.Response) -> dict[str, Any]:
    """Decode an error body, returning an empty dict when it is unusable."""
    try:
        body = response.json()
    except ValueError:
        return {}
    if not isinstance(body, dict):
        return {}
    return body


def _str_field(body: dict[str, Any], key: str, default: str | None = None) -> str | None:
    value = body.get(key)
    return value if isinstance(value, str) else default


def error_from_response(response: httpx.Response, path: str) -> EarningsFeedError:
    """
    Map a non-2xx response to its error kind.

    Args:
        response: The HTTP response with a non-success status
        path: API path that was requested (carried by NotFoundError)

    Returns:
        The exception instance to raise
    """
    status = response.status_code

    if status == 401:
        return AuthenticationError()
    if status == 404:
        return NotFoundError(path)
    if status == 429:
        return RateLimitError(parse_reset_header(response.headers.get(RATE_LIMIT_RESET_HEADER)))
    if status == 400:
        body = _error_body(response)
        return ValidationError(_str_field(body, "error", "Invalid request"))

    body = _error_body(response)
    return APIError(
        status=status,
        message=_str_field(body, "error", "Unknown error"),
        code=_str_field(body, "code"),
    )
