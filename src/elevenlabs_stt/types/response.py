"""
Transcription response model.

Mirrors the JSON returned by the speech-to-text endpoint. Every field is
optional: keys missing from the body stay ``None`` and are never written
back out as explicit nulls.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SttCharacter(BaseModel):
    """A single character with its timing (character granularity only)."""

    text: str | None = Field(default=None, description="Character text")
    start: float | None = Field(default=None, description="Start offset in seconds")
    end: float | None = Field(default=None, description="End offset in seconds")


class SttWord(BaseModel):
    """A transcribed word, spacing or audio event."""

    model_config = ConfigDict(populate_by_name=True)

    text: str | None = Field(default=None, description="Word text")
    start: float | None = Field(default=None, description="Start offset in seconds")
    end: float | None = Field(default=None, description="End offset in seconds")
    logprob: float | None = Field(default=None, description="Log probability of the word")
    word_type: str | None = Field(
        default=None,
        alias="type",
        description="Classification: 'word', 'spacing' or 'audio_event'",
    )
    speaker_id: str | None = Field(
        default=None, description="Speaker label (diarization only)"
    )
    channel_index: int | None = Field(
        default=None, description="Source channel (multi-channel only)"
    )
    characters: list[SttCharacter] | None = Field(
        default=None, description="Per-character breakdown (character granularity only)"
    )


class SttResponse(BaseModel):
    """Result of a speech-to-text call.

    Example:
        >>> response = SttResponse.from_json('{"text": "hello"}')
        >>> response.text
        'hello'
    """

    text: str | None = Field(default=None, description="Full transcript")
    language_code: str | None = Field(default=None, description="Detected language code")
    language_probability: float | None = Field(
        default=None, description="Confidence of the language detection"
    )
    words: list[SttWord] | None = Field(default=None, description="Ordered word entries")

    @classmethod
    def from_json(cls, data: str | bytes) -> SttResponse:
        """Decode a response body.

        Raises:
            pydantic.ValidationError: If the body is not a matching JSON object
        """
        return cls.model_validate_json(data)

    def to_json(self) -> str:
        """Encode to JSON, omitting absent fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
