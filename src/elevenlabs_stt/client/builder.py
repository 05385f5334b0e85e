"""
Builder for speech-to-text requests.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from elevenlabs_stt.models import DEFAULT_MODEL
from elevenlabs_stt.types.request import SttRequest, TimestampsGranularity

if TYPE_CHECKING:
    from elevenlabs_stt.client.core import ElevenLabsSttClient
    from elevenlabs_stt.types.response import SttResponse


class SpeechToTextBuilder:
    """Immutable builder for speech-to-text requests.

    Every setter returns a new builder with one field changed, so partially
    configured builders can be shared and extended safely. The last value
    set for a field wins; fields never set are omitted from the request.

    Example:
        >>> response = await (
        ...     client.speech_to_text(audio)
        ...     .language_code("en")
        ...     .diarize(True)
        ...     .timestamps_granularity("word")
        ...     .execute()
        ... )
    """

    def __init__(
        self,
        client: ElevenLabsSttClient,
        file: bytes | None = None,
        *,
        file_name: str = "file",
        params: Mapping[str, Any] | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            client: Parent client that executes the request
            file: Audio/video bytes, or None when using cloud_storage_url
            file_name: Filename sent with the binary part
            params: Fields set so far
        """
        self._client = client
        self._file = file
        self._file_name = file_name
        self._params: dict[str, Any] = dict(params or {})

    def _with(self, name: str, value: Any) -> SpeechToTextBuilder:
        return SpeechToTextBuilder(
            self._client,
            self._file,
            file_name=self._file_name,
            params={**self._params, name: value},
        )

    @property
    def params(self) -> dict[str, Any]:
        """Copy of the fields set so far."""
        return dict(self._params)

    @property
    def file(self) -> bytes | None:
        return self._file

    def model(self, model_id: str) -> SpeechToTextBuilder:
        """Set the model (defaults to scribe_v1)."""
        return self._with("model_id", model_id)

    def language_code(self, language_code: str) -> SpeechToTextBuilder:
        """Set the ISO-639 language code; detected automatically when unset."""
        return self._with("language_code", language_code)

    def tag_audio_events(self, enabled: bool) -> SpeechToTextBuilder:
        """Tag audio events such as (laughter) in the transcript."""
        return self._with("tag_audio_events", enabled)

    def num_speakers(self, count: int) -> SpeechToTextBuilder:
        """Set the maximum number of speakers (up to 32)."""
        return self._with("num_speakers", count)

    def timestamps_granularity(
        self, granularity: TimestampsGranularity | str
    ) -> SpeechToTextBuilder:
        """Set timestamp granularity: none, word or character.

        Raises:
            ValueError: If the value is not a known granularity
        """
        return self._with("timestamps_granularity", TimestampsGranularity(granularity))

    def diarize(self, enabled: bool) -> SpeechToTextBuilder:
        """Annotate which speaker is talking."""
        return self._with("diarize", enabled)

    def diarization_threshold(self, threshold: float) -> SpeechToTextBuilder:
        """Set the diarization threshold.

        Only meaningful with diarize=True and num_speakers unset.
        """
        return self._with("diarization_threshold", threshold)

    def cloud_storage_url(self, url: str) -> SpeechToTextBuilder:
        """Transcribe a remote HTTPS file instead of uploaded bytes."""
        return self._with("cloud_storage_url", url)

    def webhook(self, enabled: bool) -> SpeechToTextBuilder:
        """Deliver the result to configured webhooks instead of the response."""
        return self._with("webhook", enabled)

    def webhook_id(self, webhook_id: str) -> SpeechToTextBuilder:
        """Target a single webhook (requires webhook=True)."""
        return self._with("webhook_id", webhook_id)

    def temperature(self, temperature: float) -> SpeechToTextBuilder:
        """Set sampling temperature (0.0 to 2.0)."""
        return self._with("temperature", temperature)

    def seed(self, seed: int) -> SpeechToTextBuilder:
        """Set a best-effort deterministic seed (0 to 2147483647)."""
        return self._with("seed", seed)

    def use_multi_channel(self, enabled: bool) -> SpeechToTextBuilder:
        """Transcribe each channel (up to 5) independently."""
        return self._with("use_multi_channel", enabled)

    def webhook_metadata(self, metadata: str | Mapping[str, Any]) -> SpeechToTextBuilder:
        """Attach metadata to the webhook payload.

        Args:
            metadata: JSON object string, or a mapping to be JSON-encoded
        """
        if isinstance(metadata, Mapping):
            metadata = json.dumps(dict(metadata), separators=(",", ":"))
        return self._with("webhook_metadata", metadata)

    def build(self) -> SttRequest:
        """Finalize the request, filling the default model if unset."""
        params = dict(self._params)
        model_id = params.pop("model_id", None) or DEFAULT_MODEL
        return SttRequest(
            file=self._file,
            model_id=model_id,
            file_name=self._file_name,
            **params,
        )

    async def execute(self) -> SttResponse:
        """Execute the request.

        Returns:
            Decoded transcription

        Raises:
            SttError: On any failure
        """
        return await self._client._execute_stt(self.build())
