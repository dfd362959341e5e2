"""Upload coordination - validate files and hand them to an uploader.

The editor never talks to the network itself. An ``Uploader`` takes the
file bytes and returns an opaque reference string, which the editor then
inserts as the value of the tag whose panel requested the upload.
"""

from __future__ import annotations

import asyncio
import hashlib
import io
import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from PIL import Image, UnidentifiedImageError

from ubb_editor.edit.messages import MessageArea
from ubb_editor.edit.options import MAX_UPLOAD_SIZE

logger = logging.getLogger(__name__)

IMAGE_TAG = "img"

MSG_TOO_LARGE = "File too large"
MSG_NOT_IMAGE = "Not an image"
MSG_IN_PROGRESS = "Upload in progress"
MSG_FAILED = "Upload failed"


class UploadError(Exception):
    """Raised by an uploader when the transfer fails."""


@dataclass(frozen=True)
class UploadFile:
    """A file chosen for upload.

    Attributes:
        name: Original file name
        data: File contents
        content_type: MIME type, if known
    """
    name: str
    data: bytes
    content_type: Optional[str] = None

    @classmethod
    def from_path(cls, path: Path | str) -> UploadFile:
        """Read a file from disk, guessing its MIME type from the name."""
        path = Path(path)
        content_type, _ = mimetypes.guess_type(path.name)
        return cls(path.name, path.read_bytes(), content_type)

    @property
    def size(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"UploadFile(name={self.name!r}, size={self.size}, content_type={self.content_type!r})"


@runtime_checkable
class Uploader(Protocol):
    """Service that stores file bytes and returns a reference to them."""

    async def upload(self, file: UploadFile) -> str:
        """Store the file.

        Raises:
            UploadError: If the transfer fails
        """
        ...


class LocalUploader:
    """Uploader that stores files in a local directory.

    Files are named by content hash, so uploading the same bytes twice
    yields the same reference.

    Attributes:
        _directory: Destination directory
        _base_url: Prefix of the returned reference
    """

    def __init__(self, directory: Path | str, base_url: str = "") -> None:
        self._directory = Path(directory)
        self._base_url = base_url.rstrip("/")

    @property
    def directory(self) -> Path:
        return self._directory

    async def upload(self, file: UploadFile) -> str:
        digest = hashlib.sha1(file.data).hexdigest()[:16]
        name = digest + Path(file.name).suffix.lower()
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            await asyncio.to_thread((self._directory / name).write_bytes, file.data)
        except OSError as e:
            raise UploadError(f"Cannot store {file.name}: {e}") from e
        if self._base_url:
            return f"{self._base_url}/{name}"
        return str(self._directory / name)


def is_image(data: bytes) -> bool:
    """Check whether bytes decode as an image Pillow understands."""
    try:
        with Image.open(io.BytesIO(data)) as image:
            image.verify()
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError):
        return False
    return True


class UploadCoordinator:
    """Validates uploads and runs them one at a time.

    Rejections and failures are reported through the message area and
    return None; nothing is raised to the caller.

    Example:
        coordinator = UploadCoordinator(LocalUploader("files"), MessageArea())
        reference = await coordinator.handle(UploadFile.from_path("a.png"), "img")
    """

    def __init__(
        self,
        uploader: Uploader,
        messages: MessageArea,
        max_size: int = MAX_UPLOAD_SIZE,
    ) -> None:
        self._uploader = uploader
        self._messages = messages
        self._max_size = max_size
        self._ticket: object | None = None

    @property
    def pending(self) -> bool:
        """Whether an upload is outstanding."""
        return self._ticket is not None

    @property
    def max_size(self) -> int:
        return self._max_size

    def validate(self, file: UploadFile, tag_name: str) -> Optional[str]:
        """Check a file before uploading.

        Returns:
            The message explaining the rejection, or None if acceptable
        """
        if self.pending:
            return MSG_IN_PROGRESS
        if file.size > self._max_size:
            return MSG_TOO_LARGE
        if tag_name == IMAGE_TAG and not is_image(file.data):
            return MSG_NOT_IMAGE
        return None

    async def handle(self, file: UploadFile, tag_name: str) -> Optional[str]:
        """Validate and upload a file.

        Args:
            file: File to upload
            tag_name: Tag whose panel requested the upload

        Returns:
            The uploader's reference, or None if rejected, failed or cancelled
        """
        problem = self.validate(file, tag_name)
        if problem is not None:
            logger.info("rejected upload of %s: %s", file.name, problem)
            self._messages.show(problem)
            return None

        ticket = object()
        self._ticket = ticket
        reference: Optional[str] = None
        try:
            reference = await self._uploader.upload(file)
        except Exception:
            logger.exception("upload of %s failed", file.name)
        finally:
            cancelled = self._ticket is not ticket
            if not cancelled:
                self._ticket = None

        if cancelled:
            logger.debug("discarding result of cancelled upload %s", file.name)
            return None
        if reference is None:
            self._messages.show(MSG_FAILED)
        return reference

    def cancel(self) -> bool:
        """Abandon the outstanding upload so its result is discarded.

        The transfer itself keeps running in the uploader.

        Returns:
            True if an upload was outstanding
        """
        if self._ticket is None:
            return False
        self._ticket = None
        return True
