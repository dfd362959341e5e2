"""Shared fixtures: owner callback, fake clock and fake uploaders."""

import asyncio
import io
from typing import Optional

import pytest
from PIL import Image

from ubb_editor.edit.upload import UploadError, UploadFile


class FakeClock:
    """Manually advanced replacement for time.monotonic."""

    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingUploader:
    """Uploader that records files and returns a fixed reference.

    When ``gate`` is set the upload waits for it, so tests can interleave
    other editor calls with an outstanding upload.
    """

    def __init__(self, reference: str = "https://file.example/abc.png") -> None:
        self.reference = reference
        self.files: list[UploadFile] = []
        self.gate: Optional[asyncio.Event] = None

    async def upload(self, file: UploadFile) -> str:
        self.files.append(file)
        if self.gate is not None:
            await self.gate.wait()
        return self.reference


class FailingUploader:
    """Uploader whose transport always fails."""

    def __init__(self) -> None:
        self.calls = 0

    async def upload(self, file: UploadFile) -> str:
        self.calls += 1
        raise UploadError("connection reset")


class BrokenUploader:
    """Uploader whose client fails with an unexpected error."""

    async def upload(self, file: UploadFile) -> str:
        raise RuntimeError("HTTP 502 Bad Gateway")


@pytest.fixture
def owner() -> list[str]:
    """Values pushed to the owner, in order (use ``owner.append`` as callback)."""
    return []


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def uploader() -> RecordingUploader:
    return RecordingUploader()


@pytest.fixture
def failing_uploader() -> FailingUploader:
    return FailingUploader()


@pytest.fixture
def broken_uploader() -> BrokenUploader:
    return BrokenUploader()


@pytest.fixture
def png_bytes() -> bytes:
    """A tiny valid PNG image."""
    buf = io.BytesIO()
    Image.new("RGB", (2, 2), (255, 0, 0)).save(buf, format="PNG")
    return buf.getvalue()
