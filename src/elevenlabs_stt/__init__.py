"""
elevenlabs-stt: async client for the ElevenLabs Speech-to-Text API.

Example:
    >>> from elevenlabs_stt import ElevenLabsSttClient
    >>> async with ElevenLabsSttClient("sk_...") as client:
    ...     response = await client.speech_to_text(audio).execute()
"""
from __future__ import annotations

from elevenlabs_stt import models
from elevenlabs_stt.client import ElevenLabsSttClient, SpeechToTextBuilder
from elevenlabs_stt.errors import (
    ApiError,
    AuthenticationError,
    ParseError,
    QuotaExceededError,
    RateLimitError,
    RequestError,
    SttError,
    ValidationError,
)
from elevenlabs_stt.types import (
    SttCharacter,
    SttRequest,
    SttResponse,
    SttWord,
    TimestampsGranularity,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "ElevenLabsSttClient",
    "SpeechToTextBuilder",
    "models",
    # Errors
    "ApiError",
    "AuthenticationError",
    "ParseError",
    "QuotaExceededError",
    "RateLimitError",
    "RequestError",
    "SttError",
    "ValidationError",
    # Types
    "SttCharacter",
    "SttRequest",
    "SttResponse",
    "SttWord",
    "TimestampsGranularity",
    # Version
    "__version__",
]
