"""
Transcription request model.

Holds every parameter accepted by the speech-to-text endpoint and knows
how to render itself as multipart form fields.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from elevenlabs_stt.errors import ValidationError
from elevenlabs_stt.models import DEFAULT_MODEL

MAX_SPEAKERS = 32
MAX_SEED = 2147483647
MIN_TEMPERATURE = 0.0
MAX_TEMPERATURE = 2.0
MAX_WEBHOOK_METADATA_BYTES = 16 * 1024
MAX_WEBHOOK_METADATA_DEPTH = 2


class TimestampsGranularity(str, Enum):
    """Granularity of timestamps in the transcription."""

    NONE = "none"
    WORD = "word"
    CHARACTER = "character"


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, float):
        # Positional notation: 1e-05 is sent as 0.00001
        return format(Decimal(repr(value)), "f")
    return str(value)


def _json_depth(value: Any) -> int:
    if isinstance(value, dict):
        return 1 + max((_json_depth(v) for v in value.values()), default=0)
    if isinstance(value, list):
        return 1 + max((_json_depth(v) for v in value), default=0)
    return 0


@dataclass(frozen=True)
class SttRequest:
    """A finalized speech-to-text request.

    Exactly one of ``file`` or ``cloud_storage_url`` should be provided.
    Nothing is checked at construction; call :meth:`validate` to enforce
    the documented constraints locally.
    """

    file: bytes | None = None
    model_id: str = DEFAULT_MODEL
    language_code: str | None = None
    tag_audio_events: bool | None = None
    num_speakers: int | None = None
    timestamps_granularity: TimestampsGranularity | None = None
    diarize: bool | None = None
    diarization_threshold: float | None = None
    cloud_storage_url: str | None = None
    webhook: bool | None = None
    webhook_id: str | None = None
    temperature: float | None = None
    seed: int | None = None
    use_multi_channel: bool | None = None
    webhook_metadata: str | None = None
    file_name: str = "file"

    # Wire order of the optional text fields
    _OPTIONAL_FIELDS = (
        "language_code",
        "tag_audio_events",
        "num_speakers",
        "timestamps_granularity",
        "diarize",
        "diarization_threshold",
        "cloud_storage_url",
        "webhook",
        "webhook_id",
        "temperature",
        "seed",
        "use_multi_channel",
        "webhook_metadata",
    )

    def to_form_fields(self) -> list[tuple[str, str]]:
        """Render the text parts of the multipart body.

        Returns:
            Ordered (name, value) pairs; absent fields are omitted
        """
        fields = [("model_id", self.model_id)]
        for name in self._OPTIONAL_FIELDS:
            value = getattr(self, name)
            if value is not None:
                fields.append((name, _render(value)))
        return fields

    def validate(self) -> None:
        """Check the request against the endpoint's documented constraints.

        Raises:
            ValidationError: On the first violated constraint
        """
        if (self.file is None) == (self.cloud_storage_url is None):
            raise ValidationError(
                "Exactly one of file or cloud_storage_url must be provided",
                field="file",
            )

        if self.num_speakers is not None and not 1 <= self.num_speakers <= MAX_SPEAKERS:
            raise ValidationError(
                f"num_speakers must be between 1 and {MAX_SPEAKERS}",
                field="num_speakers",
                actual=self.num_speakers,
            )

        if self.diarization_threshold is not None:
            if not self.diarize:
                raise ValidationError(
                    "diarization_threshold requires diarize=True",
                    field="diarization_threshold",
                )
            if self.num_speakers is not None:
                raise ValidationError(
                    "diarization_threshold cannot be combined with num_speakers",
                    field="diarization_threshold",
                )

        if self.webhook_id is not None and not self.webhook:
            raise ValidationError("webhook_id requires webhook=True", field="webhook_id")

        if self.temperature is not None and not (
            MIN_TEMPERATURE <= self.temperature <= MAX_TEMPERATURE
        ):
            raise ValidationError(
                f"temperature must be between {MIN_TEMPERATURE} and {MAX_TEMPERATURE}",
                field="temperature",
                actual=self.temperature,
            )

        if self.seed is not None and not 0 <= self.seed <= MAX_SEED:
            raise ValidationError(
                f"seed must be between 0 and {MAX_SEED}",
                field="seed",
                actual=self.seed,
            )

        if self.webhook_metadata is not None:
            self._validate_webhook_metadata(self.webhook_metadata)

    @staticmethod
    def _validate_webhook_metadata(raw: str) -> None:
        if len(raw.encode("utf-8")) > MAX_WEBHOOK_METADATA_BYTES:
            raise ValidationError(
                "webhook_metadata exceeds 16KB",
                field="webhook_metadata",
            )
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValidationError(
                f"webhook_metadata is not valid JSON: {e}",
                field="webhook_metadata",
            ) from e
        if not isinstance(parsed, dict):
            raise ValidationError(
                "webhook_metadata must be a JSON object",
                field="webhook_metadata",
                expected="object",
                actual=type(parsed).__name__,
            )
        depth = _json_depth(parsed)
        if depth > MAX_WEBHOOK_METADATA_DEPTH:
            raise ValidationError(
                f"webhook_metadata nesting exceeds {MAX_WEBHOOK_METADATA_DEPTH} levels",
                field="webhook_metadata",
                actual=depth,
            )
