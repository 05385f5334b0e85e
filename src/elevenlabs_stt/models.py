"""
Speech-to-text model identifiers.
"""

from __future__ import annotations

SCRIBE_V1 = "scribe_v1"
SCRIBE_V1_EXPERIMENTAL = "scribe_v1_experimental"

DEFAULT_MODEL = SCRIBE_V1

__all__ = [
    "DEFAULT_MODEL",
    "SCRIBE_V1",
    "SCRIBE_V1_EXPERIMENTAL",
]
