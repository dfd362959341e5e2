"""EditorOptions - optional settings for an editor instance."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Callable, Mapping, Sequence, Union

from ubb_editor.edit.messages import MESSAGE_TIMEOUT

# Largest file accepted for upload (5 MiB)
MAX_UPLOAD_SIZE = 5 * 1024 * 1024


@dataclass
class EditorOptions:
    """Settings for an editor instance.

    Attributes:
        height: Height of the text surface in rem; the whole component is
            roughly 2-4 rem taller
        allowed_tags: "all", or the tag names the toolbar may insert
        submit: Called on Ctrl+Enter, if set
        max_upload_size: Largest accepted upload in bytes
        message_timeout: Seconds a transient message stays visible
    """
    height: float = 32.5
    allowed_tags: Union[str, Sequence[str]] = "all"
    submit: Callable[[], None] | None = field(default=None, repr=False)
    max_upload_size: int = MAX_UPLOAD_SIZE
    message_timeout: float = MESSAGE_TIMEOUT

    def __post_init__(self) -> None:
        if isinstance(self.allowed_tags, str) and self.allowed_tags != "all":
            raise ValueError(f"allowed_tags must be 'all' or a list, got {self.allowed_tags!r}")
        if self.max_upload_size <= 0:
            raise ValueError(f"max_upload_size must be positive, got {self.max_upload_size}")
        if self.message_timeout < 0:
            raise ValueError(f"message_timeout must not be negative, got {self.message_timeout}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EditorOptions:
        """Build options from plain data (e.g. a parsed config file).

        Raises:
            ValueError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)} - {"submit"}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown editor options: {', '.join(sorted(unknown))}")
        values = dict(data)
        if isinstance(values.get("allowed_tags"), list):
            values["allowed_tags"] = tuple(values["allowed_tags"])
        return cls(**values)

    @classmethod
    def load(cls, path: Path | str) -> EditorOptions:
        """Load options from a JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a JSON object")
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the file-backed settings."""
        allowed = self.allowed_tags if isinstance(self.allowed_tags, str) else list(self.allowed_tags)
        return {
            "height": self.height,
            "allowed_tags": allowed,
            "max_upload_size": self.max_upload_size,
            "message_timeout": self.message_timeout,
        }
