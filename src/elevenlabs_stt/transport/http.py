"""
HTTP transport using httpx for async multipart requests.

Provides:
- One pooled AsyncClient reused across calls
- Optional timeout and proxy configuration
- Status classification into the error taxonomy
"""

from __future__ import annotations

import importlib.util
import os
from contextlib import suppress
from importlib.metadata import PackageNotFoundError, version
from typing import Any

import httpx

from elevenlabs_stt.errors import RequestError, error_from_response
from elevenlabs_stt.telemetry import get_logger
from elevenlabs_stt.transport.auth import get_auth_header

DEFAULT_BASE_URL = "https://api.elevenlabs.io/v1"

_UA_VERSION: str | None = None

logger = get_logger("elevenlabs_stt.transport")


def _http2_enabled() -> bool:
    """Enable HTTP/2 only when optional dependency is present."""
    return importlib.util.find_spec("h2") is not None


def _trust_env_enabled() -> bool:
    """Use env proxy settings only when explicitly enabled."""
    return os.getenv("ELEVENLABS_HTTP_TRUST_ENV", "0") == "1"


def _get_ua_version() -> str:
    """Get package version for User-Agent (cached)."""
    global _UA_VERSION
    if _UA_VERSION is None:
        try:
            _UA_VERSION = version("elevenlabs-stt")
        except PackageNotFoundError:
            _UA_VERSION = "0.1.0"
    return _UA_VERSION


def resolve_base_url(base_url: str | None = None) -> str:
    """Explicit URL, then ELEVENLABS_BASE_URL, then production."""
    url = base_url or os.getenv("ELEVENLABS_BASE_URL") or DEFAULT_BASE_URL
    return url.rstrip("/")


def resolve_timeout(timeout: float | None = None) -> float | None:
    """Explicit timeout, then ELEVENLABS_HTTP_TIMEOUT_SECS, else no deadline."""
    if timeout is not None:
        return timeout
    env_timeout = os.getenv("ELEVENLABS_HTTP_TIMEOUT_SECS")
    if env_timeout:
        with suppress(ValueError):
            return float(env_timeout)
    return None


class HttpTransport:
    """HTTP transport for the speech-to-text API.

    Example:
        >>> transport = HttpTransport(api_key="sk_...")
        >>> response = await transport.post_multipart(
        ...     "/speech-to-text", [("model_id", "scribe_v1")], file=("file", audio)
        ... )
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        proxy: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize HTTP transport.

        Args:
            api_key: API key sent as the xi-api-key header
            base_url: Base URL (defaults to env or production)
            timeout: Request timeout in seconds (None for no deadline)
            proxy: Proxy URL
            client: Externally owned AsyncClient to reuse
        """
        self._api_key = api_key
        self._base_url = resolve_base_url(base_url)
        self._timeout = resolve_timeout(timeout)

        if proxy is not None:
            self._proxy = proxy
        elif _trust_env_enabled():
            self._proxy = os.getenv("ELEVENLABS_PROXY_URL")
        else:
            self._proxy = None

        self._client = client
        self._owns_client = client is None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float | None:
        return self._timeout

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                proxy=self._proxy,
                http2=_http2_enabled(),
                trust_env=_trust_env_enabled(),
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _build_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": f"elevenlabs-stt-python/{_get_ua_version()}",
        }
        headers.update(get_auth_header(self._api_key))
        return headers

    async def post_multipart(
        self,
        path: str,
        fields: list[tuple[str, str]],
        *,
        file: tuple[str, bytes] | None = None,
    ) -> httpx.Response:
        """POST a multipart/form-data body.

        Text fields are sent as filename-less parts so the body is multipart
        even when no file is attached.

        Args:
            path: Request path (relative to base URL)
            fields: Ordered (name, value) text parts
            file: Optional (filename, data) sent as the "file" part

        Returns:
            HTTP response with a success status

        Raises:
            RequestError: On network/connection errors
            SttError: Classified error on non-success status
        """
        url = f"{self._base_url}{path}"
        parts: list[tuple[str, Any]] = [
            (name, (None, value.encode("utf-8"))) for name, value in fields
        ]
        if file is not None:
            filename, data = file
            parts.append(("file", (filename, data, "application/octet-stream")))

        client = self._get_client()
        try:
            response = await client.post(url, files=parts, headers=self._build_headers())
        except httpx.HTTPError as e:
            logger.warning("Speech-to-text request failed", url=url, error=type(e).__name__)
            if isinstance(e, httpx.ConnectError):
                message = f"Connection failed: {e}"
            elif isinstance(e, httpx.TimeoutException):
                message = f"Request timed out: {e}"
            else:
                message = f"HTTP error: {e}"
            raise RequestError(message, url=url, cause=e) from e

        if not response.is_success:
            logger.warning(
                "Speech-to-text request failed",
                url=url,
                status_code=response.status_code,
            )
            raise error_from_response(response.status_code, response.text, response.headers)

        return response
