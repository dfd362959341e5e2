"""Selection offsets and the tracker that remembers them between edits."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Selection:
    """A character range in the edited text.

    Attributes:
        start: Offset of the first selected character
        end: Offset just past the last selected character
    """
    start: int = 0
    end: int = 0

    @classmethod
    def caret(cls, position: int) -> Selection:
        """Collapsed selection at a single position."""
        return cls(position, position)

    @property
    def is_collapsed(self) -> bool:
        return self.start == self.end

    def __len__(self) -> int:
        return max(0, self.end - self.start)

    def clamp(self, length: int) -> Selection:
        """Clamp both offsets into [0, length] and order them.

        Args:
            length: Length of the text the selection will be applied to

        Returns:
            A selection that is safe to slice with
        """
        start = min(max(self.start, 0), length)
        end = min(max(self.end, 0), length)
        if end < start:
            start, end = end, start
        return Selection(start, end)

    def split(self, text: str) -> tuple[str, str, str]:
        """Split text into (before, selected, after) around this range."""
        sel = self.clamp(len(text))
        return text[:sel.start], text[sel.start:sel.end], text[sel.end:]


class SelectionTracker:
    """Holds the last known selection of the edit surface.

    The surface reports its offsets when it loses focus, so a toolbar
    button pressed afterwards still acts on what the user had selected.
    Offsets are stored as reported and clamped when they are read back.
    """

    def __init__(self) -> None:
        self._selection = Selection()

    @property
    def selection(self) -> Selection:
        """The stored selection, unclamped."""
        return self._selection

    def on_blur(self, start: int, end: int) -> None:
        """Record the offsets the surface had when it lost focus."""
        self._selection = Selection(start, end)

    def set(self, selection: Selection) -> None:
        """Store a selection computed by an edit."""
        self._selection = selection

    def resolve(self, text: str) -> Selection:
        """Stored selection clamped to the bounds of text."""
        return self._selection.clamp(len(text))
