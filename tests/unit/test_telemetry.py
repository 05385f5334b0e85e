"""Tests for telemetry module."""

import io
import json
import logging
from collections.abc import Iterator

import pytest

from elevenlabs_stt.telemetry import (
    JsonFormatter,
    LogLevel,
    SensitiveDataMasker,
    SttLogger,
    TextFormatter,
    get_logger,
)


@pytest.fixture
def reset_logging() -> Iterator[None]:
    """Undo SttLogger.configure() so other tests see default propagation."""
    yield
    SttLogger._handler = None
    SttLogger._level = LogLevel.INFO
    for logger in SttLogger._loggers.values():
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


def _record(msg: str, **fields: object) -> logging.LogRecord:
    record = logging.LogRecord("elevenlabs_stt.test", logging.INFO, __file__, 1, msg, None, None)
    if fields:
        record.extra_fields = fields
    return record


class TestSensitiveDataMasker:
    """Tests for API key masking."""

    def test_masks_elevenlabs_key(self) -> None:
        masker = SensitiveDataMasker()
        result = masker.mask("using sk_0123456789abcdef0123 for calls")
        assert "sk_0123456789abcdef0123" not in result
        assert "***REDACTED***" in result

    def test_masks_header(self) -> None:
        masker = SensitiveDataMasker()
        assert masker.mask("xi-api-key: secret123") == "xi-api-key: ***REDACTED***"

    def test_masks_env_assignment(self) -> None:
        masker = SensitiveDataMasker()
        assert masker.mask("ELEVENLABS_API_KEY=abc") == "ELEVENLABS_API_KEY=***REDACTED***"

    def test_leaves_plain_text(self) -> None:
        assert SensitiveDataMasker().mask("model=scribe_v1") == "model=scribe_v1"

    def test_mask_dict(self) -> None:
        masker = SensitiveDataMasker()
        result = masker.mask_dict(
            {"api_key": "abc", "model": "scribe_v1", "nested": {"token": "t"}}
        )
        assert result == {
            "api_key": "***REDACTED***",
            "model": "scribe_v1",
            "nested": {"token": "***REDACTED***"},
        }


class TestFormatters:
    """Tests for log formatters."""

    def test_json_formatter(self) -> None:
        line = JsonFormatter().format(_record("sent", model="scribe_v1", api_key="abc"))
        data = json.loads(line)
        assert data["message"] == "sent"
        assert data["level"] == "INFO"
        assert data["model"] == "scribe_v1"
        assert data["api_key"] == "***REDACTED***"
        assert data["timestamp"].endswith("Z")

    def test_text_formatter(self) -> None:
        line = TextFormatter().format(_record("xi-api-key: k1", status_code=500))
        assert "k1" not in line
        assert line.endswith("| status_code=500")


class TestSttLogger:
    """Tests for logger configuration."""

    def test_same_logger_returned(self) -> None:
        assert get_logger("elevenlabs_stt.x").name == "elevenlabs_stt.x"

    def test_unconfigured_logger_propagates(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="elevenlabs_stt.propagating")
        get_logger("elevenlabs_stt.propagating").debug("hello", size=3)
        assert caplog.records[-1].getMessage() == "hello"
        assert caplog.records[-1].extra_fields == {"size": 3}

    def test_configure_json(self, reset_logging: None) -> None:
        stream = io.StringIO()
        logger = get_logger("elevenlabs_stt.configured")
        SttLogger.configure(level=LogLevel.DEBUG, format="json", stream=stream)

        logger.debug("request", model="scribe_v1")

        data = json.loads(stream.getvalue().strip())
        assert data["message"] == "request"
        assert data["model"] == "scribe_v1"
        assert logger.is_enabled_for(LogLevel.DEBUG)

    def test_configure_level_filters(self, reset_logging: None) -> None:
        stream = io.StringIO()
        SttLogger.configure(level=LogLevel.WARNING, stream=stream)
        logger = get_logger("elevenlabs_stt.filtered")

        logger.info("quiet")
        logger.warning("loud")

        output = stream.getvalue()
        assert "quiet" not in output
        assert "loud" in output
