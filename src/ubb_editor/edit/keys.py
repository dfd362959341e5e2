"""Keyboard events and the editor's shortcut table.

Shortcuts are defined once with their key, label and the name of the
editor method they call, so the same table drives key handling and the
help listing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class Key(Enum):
    """Named key constants."""
    ENTER = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key press on the edit surface."""
    key: Optional[Key] = None   # Named key if recognized
    char: Optional[str] = None  # Character if printable
    ctrl: bool = False
    shift: bool = False

    @classmethod
    def ctrl_char(cls, char: str) -> KeyEvent:
        """Ctrl plus a character, e.g. ``KeyEvent.ctrl_char("z")``."""
        return cls(char=char, ctrl=True)


@dataclass(frozen=True)
class ShortcutDef:
    """Definition of a keyboard shortcut.

    Attributes:
        id: Unique identifier for the shortcut
        keys: Keys or characters that trigger it (with Ctrl held)
        label: Short label for toolbars
        description: Longer description for help listings
        handler: Name of the editor method to call
    """
    id: str
    keys: tuple[str | Key, ...]
    label: str
    description: str
    handler: str

    def matches(self, event: KeyEvent) -> bool:
        """Check if a key event matches this shortcut."""
        if not event.ctrl:
            return False
        for key in self.keys:
            if isinstance(key, Key):
                if event.key == key:
                    return True
            elif event.char == key:
                return True
        return False

    @property
    def key_display(self) -> str:
        """Display string such as ``Ctrl+Z``."""
        names = [key.name.title() if isinstance(key, Key) else key.upper() for key in self.keys]
        return "/".join(f"Ctrl+{name}" for name in names)


EDITOR_SHORTCUTS: tuple[ShortcutDef, ...] = (
    ShortcutDef("undo", ("z",), "Undo", "Undo the last change", "undo"),
    ShortcutDef("redo", ("y",), "Redo", "Redo the last undone change", "redo"),
    ShortcutDef("submit", (Key.ENTER,), "Submit", "Submit the post", "submit"),
)


def match_shortcut(event: KeyEvent) -> Optional[ShortcutDef]:
    """Find the editor shortcut matching a key event."""
    for shortcut in EDITOR_SHORTCUTS:
        if shortcut.matches(event):
            return shortcut
    return None


def help_lines(width: int = 40) -> list[str]:
    """Help listing, one shortcut per line."""
    lines = []
    for shortcut in EDITOR_SHORTCUTS:
        key_str = shortcut.key_display
        padding = 14 - len(key_str)
        line = f"  {key_str}{' ' * padding}{shortcut.description}"
        if len(line) > width:
            line = line[:width - 1] + "…"
        lines.append(line)
    return lines
