"""
Transport layer - HTTP client for the speech-to-text endpoint.

Provides httpx-based transport with:
- Multipart uploads
- API key resolution
- Optional timeout/proxy configuration
- Connection reuse across calls
"""

from elevenlabs_stt.transport.auth import get_auth_header, resolve_api_key
from elevenlabs_stt.transport.http import HttpTransport

__all__ = [
    "HttpTransport",
    "get_auth_header",
    "resolve_api_key",
]
