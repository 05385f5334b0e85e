"""Root pytest fixtures for elevenlabs-stt tests."""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from unittest.mock import patch

import httpx
import pytest

STT_URL = "https://api.elevenlabs.io/v1/speech-to-text"


@dataclass
class MultipartPart:
    """One decoded part of a multipart/form-data body."""

    name: str
    filename: str | None
    content_type: str | None
    content: bytes

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")


def parse_multipart(request: httpx.Request) -> list[MultipartPart]:
    """Split a captured multipart request into its parts, in order."""
    content_type = request.headers["content-type"]
    assert content_type.startswith("multipart/form-data")
    boundary = content_type.split("boundary=", 1)[1].strip('"').encode("latin-1")

    parts: list[MultipartPart] = []
    for chunk in request.read().split(b"--" + boundary)[1:]:
        if chunk.startswith(b"--"):
            break
        chunk = chunk.removeprefix(b"\r\n").removesuffix(b"\r\n")
        head, _, content = chunk.partition(b"\r\n\r\n")
        headers = {}
        for line in head.decode("latin-1").split("\r\n"):
            key, _, value = line.partition(":")
            headers[key.strip().lower()] = value.strip()
        disposition = headers["content-disposition"]
        name = re.search(r'name="([^"]*)"', disposition)
        filename = re.search(r'filename="([^"]*)"', disposition)
        assert name is not None
        parts.append(
            MultipartPart(
                name=name.group(1),
                filename=filename.group(1) if filename else None,
                content_type=headers.get("content-type"),
                content=content,
            )
        )
    return parts


@pytest.fixture
def multipart() -> Callable[[httpx.Request], list[MultipartPart]]:
    """Parser for captured multipart requests."""
    return parse_multipart


@pytest.fixture
def stt_url() -> str:
    return STT_URL


@pytest.fixture(autouse=True)
def clean_env() -> Iterator[None]:
    """Keep developer credentials and overrides out of tests."""
    overrides = {
        k: v
        for k, v in os.environ.items()
        if not k.startswith("ELEVENLABS_")
    }
    with patch.dict(os.environ, overrides, clear=True), patch(
        "elevenlabs_stt.transport.auth._try_keyring", return_value=None
    ):
        yield

