"""
Status code classification.

Maps an HTTP status (plus body and headers) to exactly one error from the
taxonomy. This table is the only place the mapping lives.
"""

from __future__ import annotations

import contextlib
from enum import Enum
from typing import TYPE_CHECKING

from elevenlabs_stt.errors.base import (
    ApiError,
    AuthenticationError,
    QuotaExceededError,
    RateLimitError,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from elevenlabs_stt.errors.base import SttError


class ErrorKind(str, Enum):
    """Classification of a non-success response."""

    AUTHENTICATION = "authentication"
    """Missing/invalid API key."""

    QUOTA_EXCEEDED = "quota_exceeded"
    """Account has run out of credits."""

    RATE_LIMITED = "rate_limited"
    """Throttled; retry with backoff."""

    API = "api"
    """Any other non-success status."""


_STATUS_MAPPING: dict[int, ErrorKind] = {
    401: ErrorKind.AUTHENTICATION,
    402: ErrorKind.QUOTA_EXCEEDED,
    429: ErrorKind.RATE_LIMITED,
}


def classify_status(status_code: int) -> ErrorKind:
    """Classify a non-success HTTP status code."""
    return _STATUS_MAPPING.get(status_code, ErrorKind.API)


def parse_retry_after(headers: Mapping[str, str] | None) -> int | None:
    """Read a Retry-After header given in whole seconds.

    Args:
        headers: Response headers (case-insensitive mapping or plain dict)

    Returns:
        Seconds to wait, or None when absent or not numeric
    """
    if not headers:
        return None
    raw = headers.get("retry-after") or headers.get("Retry-After")
    if not raw:
        return None
    # "inf" overflows and "nan" is rejected by int()
    with contextlib.suppress(ValueError, OverflowError):
        seconds = int(float(raw.strip()))
        if seconds >= 0:
            return seconds
    return None


def error_from_response(
    status_code: int,
    body: str,
    headers: Mapping[str, str] | None = None,
) -> SttError:
    """Build the error for a non-success response.

    401, 402 and 429 carry fixed messages regardless of the body; every other
    status becomes an ApiError with the raw status and body text.

    Args:
        status_code: HTTP status code
        body: Response body text
        headers: Response headers

    Returns:
        The classified error (not raised)
    """
    kind = classify_status(status_code)
    if kind is ErrorKind.AUTHENTICATION:
        return AuthenticationError()
    if kind is ErrorKind.QUOTA_EXCEEDED:
        return QuotaExceededError()
    if kind is ErrorKind.RATE_LIMITED:
        return RateLimitError(retry_after=parse_retry_after(headers))
    return ApiError(status_code, body)
