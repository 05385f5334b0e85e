"""
Telemetry - structured logging with API key masking.
"""

from elevenlabs_stt.telemetry.logger import (
    JsonFormatter,
    LogLevel,
    SensitiveDataMasker,
    SttLogger,
    TextFormatter,
    get_logger,
)

__all__ = [
    "JsonFormatter",
    "LogLevel",
    "SensitiveDataMasker",
    "SttLogger",
    "TextFormatter",
    "get_logger",
]
