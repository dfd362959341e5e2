"""Tag registry - which UBB tags exist and how they wrap a selection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Iterator, Sequence


class TagPolicy(Enum):
    """How a tag treats the text selected when it is inserted."""
    PLAIN = auto()              # [name=value]selected[/name]
    REPLACE_SELECTION = auto()  # [name]value[/name], selection discarded
    DEFAULT_SELECTION = auto()  # [name=value]selected-or-value[/name]


@dataclass(frozen=True)
class TagSpec:
    """Definition of a markup tag.

    Attributes:
        name: Tag name as written between brackets
        policy: Wrapping policy applied to the selection
        needs_value: Whether the tag asks for an auxiliary value
            (link target, media address) before it can be inserted
        reselect: Whether the inserted span is selected afterwards;
            when False the cursor collapses to the end of the span
        label: Human readable name for toolbars and listings
    """
    name: str
    policy: TagPolicy = TagPolicy.PLAIN
    needs_value: bool = False
    reselect: bool = True
    label: str = ""


DEFAULT_TAGS: tuple[TagSpec, ...] = (
    TagSpec("b", label="Bold"),
    TagSpec("i", label="Italic"),
    TagSpec("u", label="Underline"),
    TagSpec("del", label="Strikethrough"),
    TagSpec("align", label="Align"),
    TagSpec("replyview", label="Visible after reply"),
    TagSpec("size", label="Font size"),
    TagSpec("color", label="Color"),
    TagSpec("url", TagPolicy.DEFAULT_SELECTION, needs_value=True, label="Link"),
    TagSpec("img", TagPolicy.REPLACE_SELECTION, needs_value=True, reselect=False,
            label="Image"),
    TagSpec("video", TagPolicy.REPLACE_SELECTION, needs_value=True, label="Video"),
    TagSpec("audio", TagPolicy.REPLACE_SELECTION, needs_value=True, label="Audio"),
    TagSpec("upload", TagPolicy.REPLACE_SELECTION, label="Upload"),
)

# Values offered by the size selector and the alignment buttons
SIZE_CHOICES: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7)
ALIGNMENTS: tuple[str, ...] = ("left", "center", "right")

# Color picker palette, one row per shade
COLOR_PALETTE: tuple[tuple[str, ...], ...] = (
    ("#f00", "#f90", "#ff0", "#0f0", "#0ff", "#00f", "#90f", "#f0f"),
    ("#f4cccc", "#fce5cd", "#fff2cc", "#d9ead3", "#d0e0e3", "#cfe2f3", "#d9d2e9", "#ead1dc"),
    ("#ea9999", "#f9cb9c", "#ffe599", "#b6d7a8", "#a2c4c9", "#9fc5e8", "#b4a7d6", "#d5a6bd"),
    ("#e06666", "#f6b26b", "#ffd966", "#93c47d", "#76a5af", "#6fa8dc", "#8e7cc3", "#c27ba0"),
    ("#c00", "#e69138", "#f1c232", "#6aa84f", "#45818e", "#3d85c6", "#674ea7", "#a64d79"),
    ("#900", "#b45f06", "#bf9000", "#38761d", "#134f5c", "#0b5394", "#351c75", "#741b47"),
    ("#600", "#783f04", "#7f6000", "#274e13", "#0c343d", "#073763", "#20124d", "#4c1130"),
    ("#000", "#444", "#666", "#999", "#ccc", "#eee", "#f3f3f3", "#fff"),
)


class TagRegistry:
    """Registry of known tags with an optional allow-list.

    Names that were never registered classify as plain tags, so the
    engine can still wrap arbitrary tag names.

    Example:
        registry = TagRegistry(allowed=["b", "i", "url"])
        registry.get("url").policy      # TagPolicy.DEFAULT_SELECTION
        registry.is_allowed("img")      # False
    """

    def __init__(
        self,
        tags: Iterable[TagSpec] | None = None,
        allowed: str | Sequence[str] = "all",
    ) -> None:
        self._tags: dict[str, TagSpec] = {}
        for spec in tags if tags is not None else DEFAULT_TAGS:
            self.register(spec)
        if isinstance(allowed, str):
            if allowed != "all":
                raise ValueError(f"allowed must be 'all' or a list of tag names, got {allowed!r}")
            self._allowed: frozenset[str] | None = None
        else:
            self._allowed = frozenset(allowed)

    def register(self, spec: TagSpec) -> None:
        """Add or replace a tag definition."""
        self._tags[spec.name] = spec

    def get(self, name: str) -> TagSpec:
        """Look up a tag, falling back to a plain definition."""
        spec = self._tags.get(name)
        if spec is None:
            return TagSpec(name)
        return spec

    def is_allowed(self, name: str) -> bool:
        """Check the allow-list (everything is allowed by default)."""
        return self._allowed is None or name in self._allowed

    def needs_value(self, name: str) -> bool:
        return self.get(name).needs_value

    def names(self) -> list[str]:
        """Registered tag names that pass the allow-list, in order."""
        return [name for name in self._tags if self.is_allowed(name)]

    def __contains__(self, name: object) -> bool:
        return name in self._tags

    def __iter__(self) -> Iterator[TagSpec]:
        return (self._tags[name] for name in self.names())

    def __len__(self) -> int:
        return len(self.names())
