"""
API key resolution utilities.

Resolves the API key from:
1. Explicit value
2. ELEVENLABS_API_KEY environment variable
3. System keyring (optional)
"""

from __future__ import annotations

import os

API_KEY_ENV = "ELEVENLABS_API_KEY"
API_KEY_HEADER = "xi-api-key"
KEYRING_SERVICE = "elevenlabs"


def resolve_api_key(explicit_key: str | None = None) -> str | None:
    """Resolve the API key.

    Args:
        explicit_key: Explicitly provided API key

    Returns:
        Resolved API key or None if not found
    """
    if explicit_key:
        return explicit_key

    key = os.getenv(API_KEY_ENV)
    if key:
        return key

    return _try_keyring()


def _try_keyring() -> str | None:
    """Try to get the API key from the system keyring."""
    try:
        import keyring

        return keyring.get_password(KEYRING_SERVICE, "api_key")
    except ImportError:
        # keyring extra not installed
        return None
    except Exception:
        # Keyring backend errors are common in containers and CI
        return None


def get_auth_header(api_key: str) -> dict[str, str]:
    """Get the authentication header for a resolved key."""
    return {API_KEY_HEADER: api_key}
