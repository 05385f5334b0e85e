"""
Base error classes for elevenlabs-stt.

Provides a closed error hierarchy:
- SttError: Base class for all library errors
- RequestError: Network/transport failure before a status code exists
- ApiError: Non-success status not otherwise classified
- ParseError: Success status but the body does not decode
- AuthenticationError: 401
- RateLimitError: 429
- QuotaExceededError: 402
- ValidationError: Invalid caller-supplied input
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, ClassVar


@dataclass
class ErrorContext:
    """Structured error context for diagnostics."""

    source: str | None = None
    """Error source (e.g., 'transport', 'remote', 'validation')"""

    details: dict[str, Any] = field(default_factory=dict)
    """Additional details about the error"""

    hint: str | None = None
    """Actionable hint for resolving the error"""

    def __str__(self) -> str:
        parts = []
        if self.source:
            parts.append(f"[{self.source}]")
        if self.hint:
            parts.append(f"(hint: {self.hint})")
        return " ".join(parts)


class SttError(Exception):
    """Base class for all elevenlabs-stt errors.

    Catch this to handle every failure raised by ``execute()``.

    Attributes:
        message: Human-readable error message
        context: Structured error context
    """

    prefix: ClassVar[str] = "Speech-to-text error"
    retryable: ClassVar[bool] = False

    def __init__(self, message: str, context: ErrorContext | None = None) -> None:
        self.message = message
        self.context = context or ErrorContext()
        super().__init__(self._format_message())

    def _headline(self) -> str:
        return f"{self.prefix}: {self.message}"

    def _format_message(self) -> str:
        ctx_str = str(self.context)
        if ctx_str:
            return f"{self._headline()} {ctx_str}"
        return self._headline()

    def with_hint(self, hint: str) -> SttError:
        """Add a hint to this error."""
        self.context.hint = hint
        self.args = (self._format_message(),)
        return self


class RequestError(SttError):
    """The HTTP request failed before a response arrived.

    Raised on connection failures, timeouts and TLS errors. The underlying
    httpx exception is available as ``cause`` and ``__cause__``.
    """

    prefix = "Request failed"
    retryable = True

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = ErrorContext(source="transport")
        if url:
            ctx.details["url"] = url
        super().__init__(message, ctx)
        self.url = url
        self.cause = cause
        self.__cause__ = cause


class ApiError(SttError):
    """The API answered with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        ctx = ErrorContext(source="remote", details={"status_code": status_code})
        self.status_code = status_code
        self.body = body
        super().__init__(body, ctx)

    def _headline(self) -> str:
        return f"API error ({self.status_code}): {self.message}"

    @property
    def retryable(self) -> bool:  # type: ignore[override]
        return self.status_code >= 500

    @property
    def detail(self) -> str | None:
        """Best-effort error message extracted from a JSON body."""
        try:
            data = json.loads(self.body)
        except (json.JSONDecodeError, TypeError):
            return None
        if not isinstance(data, dict):
            return None
        detail = data.get("detail")
        if isinstance(detail, dict) and isinstance(detail.get("message"), str):
            return detail["message"]
        if isinstance(detail, str):
            return detail
        message = data.get("message")
        return message if isinstance(message, str) else None


class ParseError(SttError):
    """The API answered with success but the body is not a valid response."""

    prefix = "Failed to parse response"

    def __init__(self, cause: Exception, body: str | None = None) -> None:
        super().__init__(str(cause), ErrorContext(source="decode"))
        self.cause = cause
        self.body = body
        self.__cause__ = cause


class AuthenticationError(SttError):
    """The API key was rejected (401)."""

    prefix = "Authentication failed"

    def __init__(self, message: str = "Invalid API key") -> None:
        super().__init__(message, ErrorContext(source="remote", details={"status_code": 401}))


class RateLimitError(SttError):
    """Too many requests (429).

    Attributes:
        retry_after: Seconds to wait before retrying, when the server said so
    """

    retryable = True

    def __init__(
        self,
        message: str = "Too many requests",
        *,
        retry_after: int | None = None,
    ) -> None:
        self.retry_after = retry_after
        ctx = ErrorContext(source="remote", details={"status_code": 429})
        if retry_after is not None:
            ctx.details["retry_after"] = retry_after
        super().__init__(message, ctx)

    def _headline(self) -> str:
        if self.retry_after is not None:
            return f"Rate limit exceeded (retry in {self.retry_after}s): {self.message}"
        return f"Rate limit exceeded: {self.message}"


class QuotaExceededError(SttError):
    """Not enough credits left on the account (402)."""

    prefix = "Quota exceeded"

    def __init__(self, message: str = "Insufficient credits") -> None:
        super().__init__(message, ErrorContext(source="remote", details={"status_code": 402}))


class ValidationError(SttError):
    """Invalid request parameters, detected before any network call."""

    prefix = "Validation error"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        expected: Any = None,
        actual: Any = None,
    ) -> None:
        ctx = ErrorContext(source="validation")
        if field:
            ctx.details["field"] = field
        if expected is not None:
            ctx.details["expected"] = expected
        if actual is not None:
            ctx.details["actual"] = actual
        super().__init__(message, ctx)
        self.field = field
        self.expected = expected
        self.actual = actual
