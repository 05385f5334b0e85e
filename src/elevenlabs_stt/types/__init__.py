"""
Request and response types for the speech-to-text endpoint.
"""

from elevenlabs_stt.types.request import SttRequest, TimestampsGranularity
from elevenlabs_stt.types.response import SttCharacter, SttResponse, SttWord

__all__ = [
    "SttCharacter",
    "SttRequest",
    "SttResponse",
    "SttWord",
    "TimestampsGranularity",
]
