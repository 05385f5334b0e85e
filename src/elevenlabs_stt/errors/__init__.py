"""
Error hierarchy for elevenlabs-stt.

Every failure surfaces as a subclass of SttError; nothing is retried
internally.
"""

from elevenlabs_stt.errors.base import (
    ApiError,
    AuthenticationError,
    ErrorContext,
    ParseError,
    QuotaExceededError,
    RateLimitError,
    RequestError,
    SttError,
    ValidationError,
)
from elevenlabs_stt.errors.classification import (
    ErrorKind,
    classify_status,
    error_from_response,
    parse_retry_after,
)

__all__ = [
    "ApiError",
    "AuthenticationError",
    "ErrorContext",
    "ErrorKind",
    "ParseError",
    "QuotaExceededError",
    "RateLimitError",
    "RequestError",
    "SttError",
    "ValidationError",
    "classify_status",
    "error_from_response",
    "parse_retry_after",
]
