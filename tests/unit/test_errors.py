"""Tests for error module."""

import httpx
import pytest

from elevenlabs_stt.errors import (
    ApiError,
    AuthenticationError,
    ErrorContext,
    ErrorKind,
    ParseError,
    QuotaExceededError,
    RateLimitError,
    RequestError,
    SttError,
    ValidationError,
    classify_status,
    error_from_response,
    parse_retry_after,
)


class TestErrorContext:
    """Tests for ErrorContext."""

    def test_empty_context(self) -> None:
        assert str(ErrorContext()) == ""

    def test_context_with_source_and_hint(self) -> None:
        ctx = ErrorContext(source="remote", hint="Check your API key")
        assert str(ctx) == "[remote] (hint: Check your API key)"


class TestErrorMessages:
    """Tests for rendered error messages."""

    def test_request_error(self) -> None:
        cause = httpx.ConnectError("refused")
        error = RequestError("Connection failed: refused", url="http://x", cause=cause)
        assert str(error).startswith("Request failed: Connection failed: refused")
        assert error.__cause__ is cause
        assert error.context.details["url"] == "http://x"

    def test_api_error(self) -> None:
        error = ApiError(404, "not here")
        assert str(error).startswith("API error (404): not here")
        assert error.status_code == 404
        assert error.body == "not here"

    def test_authentication_error(self) -> None:
        error = AuthenticationError()
        assert error.message == "Invalid API key"
        assert str(error).startswith("Authentication failed: Invalid API key")

    def test_rate_limit_without_retry_after(self) -> None:
        error = RateLimitError()
        assert error.message == "Too many requests"
        assert error.retry_after is None
        assert str(error).startswith("Rate limit exceeded: Too many requests")

    def test_rate_limit_with_retry_after(self) -> None:
        error = RateLimitError(retry_after=30)
        assert str(error).startswith("Rate limit exceeded (retry in 30s): Too many requests")

    def test_quota_exceeded(self) -> None:
        assert str(QuotaExceededError()).startswith("Quota exceeded: Insufficient credits")

    def test_validation_error(self) -> None:
        error = ValidationError("Invalid voice ID", field="seed")
        assert "Validation error" in str(error)
        assert "Invalid voice ID" in str(error)
        assert error.context.details["field"] == "seed"

    def test_parse_error_wraps_cause(self) -> None:
        cause = ValueError("bad json")
        error = ParseError(cause, body="<html>")
        assert str(error).startswith("Failed to parse response: bad json")
        assert error.__cause__ is cause
        assert error.body == "<html>"

    def test_with_hint(self) -> None:
        error = AuthenticationError().with_hint("Set ELEVENLABS_API_KEY")
        assert "(hint: Set ELEVENLABS_API_KEY)" in str(error)

    def test_all_errors_share_base(self) -> None:
        for error in (
            RequestError("x"),
            ApiError(500, ""),
            ParseError(ValueError("x")),
            AuthenticationError(),
            RateLimitError(),
            QuotaExceededError(),
            ValidationError("x"),
        ):
            assert isinstance(error, SttError)


class TestRetryable:
    """Tests for the retry hint."""

    def test_retryable_errors(self) -> None:
        assert RequestError("x").retryable
        assert RateLimitError().retryable
        assert ApiError(503, "").retryable

    def test_non_retryable_errors(self) -> None:
        assert not ApiError(400, "").retryable
        assert not AuthenticationError().retryable
        assert not QuotaExceededError().retryable
        assert not ValidationError("x").retryable


class TestApiErrorDetail:
    """Tests for ApiError.detail extraction."""

    def test_nested_detail_message(self) -> None:
        error = ApiError(400, '{"detail": {"status": "invalid", "message": "Bad model"}}')
        assert error.detail == "Bad model"

    def test_string_detail(self) -> None:
        assert ApiError(422, '{"detail": "Missing file"}').detail == "Missing file"

    def test_plain_text_body(self) -> None:
        assert ApiError(500, "Internal Server Error").detail is None


class TestClassification:
    """Tests for status classification."""

    @pytest.mark.parametrize(
        ("status", "kind"),
        [
            (401, ErrorKind.AUTHENTICATION),
            (402, ErrorKind.QUOTA_EXCEEDED),
            (429, ErrorKind.RATE_LIMITED),
            (400, ErrorKind.API),
            (403, ErrorKind.API),
            (404, ErrorKind.API),
            (500, ErrorKind.API),
        ],
    )
    def test_classify_status(self, status: int, kind: ErrorKind) -> None:
        assert classify_status(status) == kind

    def test_401_ignores_body(self) -> None:
        error = error_from_response(401, '{"detail": "whatever"}')
        assert isinstance(error, AuthenticationError)
        assert error.message == "Invalid API key"

    def test_402_ignores_body(self) -> None:
        error = error_from_response(402, "pay up")
        assert isinstance(error, QuotaExceededError)
        assert error.message == "Insufficient credits"

    def test_429_ignores_body(self) -> None:
        error = error_from_response(429, "slow down")
        assert isinstance(error, RateLimitError)
        assert error.message == "Too many requests"
        assert error.retry_after is None

    def test_429_reads_retry_after(self) -> None:
        error = error_from_response(429, "", httpx.Headers({"Retry-After": "12"}))
        assert isinstance(error, RateLimitError)
        assert error.retry_after == 12

    def test_other_status_keeps_status_and_body(self) -> None:
        error = error_from_response(503, "maintenance")
        assert isinstance(error, ApiError)
        assert error.status_code == 503
        assert error.body == "maintenance"


class TestParseRetryAfter:
    """Tests for Retry-After parsing."""

    def test_missing(self) -> None:
        assert parse_retry_after(None) is None
        assert parse_retry_after({}) is None

    def test_seconds(self) -> None:
        assert parse_retry_after({"retry-after": "5"}) == 5

    def test_case_insensitive_headers(self) -> None:
        assert parse_retry_after(httpx.Headers({"RETRY-AFTER": "7"})) == 7

    def test_http_date_not_supported(self) -> None:
        assert parse_retry_after({"Retry-After": "Wed, 21 Oct 2015 07:28:00 GMT"}) is None

    def test_negative(self) -> None:
        assert parse_retry_after({"Retry-After": "-3"}) is None

    @pytest.mark.parametrize("raw", ["inf", "1e400", "nan", "-inf"])
    def test_non_finite(self, raw: str) -> None:
        assert parse_retry_after({"Retry-After": raw}) is None

    def test_non_finite_still_rate_limited(self) -> None:
        error = error_from_response(429, "", {"Retry-After": "inf"})
        assert isinstance(error, RateLimitError)
        assert error.retry_after is None
