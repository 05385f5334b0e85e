"""
Client layer - User-facing API.

This module provides:
- ElevenLabsSttClient: Entry point holding credentials and transport
- SpeechToTextBuilder: Fluent API for building transcription requests
"""

from elevenlabs_stt.client.builder import SpeechToTextBuilder
from elevenlabs_stt.client.core import ElevenLabsSttClient

__all__ = [
    "ElevenLabsSttClient",
    "SpeechToTextBuilder",
]
