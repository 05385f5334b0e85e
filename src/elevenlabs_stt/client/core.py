"""
Core ElevenLabsSttClient implementation.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from elevenlabs_stt.client.builder import SpeechToTextBuilder
from elevenlabs_stt.errors import ParseError
from elevenlabs_stt.telemetry import get_logger
from elevenlabs_stt.transport import HttpTransport, resolve_api_key
from elevenlabs_stt.transport.auth import API_KEY_ENV
from elevenlabs_stt.types.response import SttResponse

if TYPE_CHECKING:
    import httpx

    from elevenlabs_stt.types.request import SttRequest

STT_PATH = "/speech-to-text"

logger = get_logger("elevenlabs_stt.client")


class ElevenLabsSttClient:
    """Async client for the ElevenLabs speech-to-text API.

    The client only holds configuration and a pooled HTTP connection, so one
    instance can serve any number of concurrent requests.

    Example:
        >>> async with ElevenLabsSttClient("sk_...") as client:
        ...     response = await client.speech_to_text(audio).execute()
        ...     print(response.text)

        >>> # Remote file, webhook delivery
        >>> await (
        ...     client.speech_to_text()
        ...     .cloud_storage_url("https://example.com/audio.mp3")
        ...     .webhook(True)
        ...     .execute()
        ... )
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        proxy: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        strict: bool = False,
    ) -> None:
        """Create a client.

        Args:
            api_key: API key; falls back to ELEVENLABS_API_KEY, then keyring
            base_url: Base URL; falls back to ELEVENLABS_BASE_URL, then production
            timeout: Request timeout in seconds; no deadline when unset
            proxy: Proxy URL
            http_client: Shared AsyncClient to send requests through
            strict: Validate requests locally before sending them

        Raises:
            ValueError: If no API key can be resolved
        """
        key = resolve_api_key(api_key)
        if not key:
            raise ValueError(f"API key required ({API_KEY_ENV})")
        self._api_key = key
        self._strict = strict
        self._transport = HttpTransport(
            key,
            base_url=base_url,
            timeout=timeout,
            proxy=proxy,
            client=http_client,
        )

    @classmethod
    def with_base_url(cls, api_key: str, base_url: str, **kwargs: Any) -> ElevenLabsSttClient:
        """Create a client pointed at a custom base URL (testing/enterprise)."""
        return cls(api_key, base_url=base_url, **kwargs)

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._transport.base_url

    @property
    def strict(self) -> bool:
        return self._strict

    def speech_to_text(
        self, file: bytes | None = None, *, file_name: str = "file"
    ) -> SpeechToTextBuilder:
        """Start building a speech-to-text request.

        Args:
            file: Audio/video bytes; pass None and set cloud_storage_url instead
            file_name: Filename sent with the binary part

        Returns:
            SpeechToTextBuilder for fluent configuration
        """
        return SpeechToTextBuilder(self, file, file_name=file_name)

    async def _execute_stt(self, request: SttRequest) -> SttResponse:
        """Send one request and decode the result (internal).

        Raises:
            ValidationError: In strict mode, before any network call
            RequestError: On transport failure
            ParseError: If a success body does not decode
            SttError: Classified error for non-success status
        """
        if self._strict:
            request.validate()

        fields = request.to_form_fields()
        file = (request.file_name, request.file) if request.file is not None else None
        logger.debug(
            "Sending speech-to-text request",
            url=f"{self.base_url}{STT_PATH}",
            model=request.model_id,
            fields=",".join(name for name, _ in fields),
            file_bytes=len(request.file) if request.file is not None else 0,
        )

        start = time.perf_counter()
        response = await self._transport.post_multipart(STT_PATH, fields, file=file)

        try:
            result = SttResponse.from_json(response.content)
        except PydanticValidationError as e:
            logger.warning("Could not decode speech-to-text response", error=str(e))
            raise ParseError(e, body=response.text) from e

        logger.debug(
            "Speech-to-text request completed",
            latency_ms=round((time.perf_counter() - start) * 1000, 1),
            words=len(result.words) if result.words else 0,
        )
        return result

    async def close(self) -> None:
        """Release pooled connections."""
        await self._transport.close()

    async def __aenter__(self) -> ElevenLabsSttClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
