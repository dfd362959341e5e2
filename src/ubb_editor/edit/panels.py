"""Mode state machine - auxiliary panels and edit/preview mode."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from ubb_editor.core.emoji import DEFAULT_CATEGORY, EmojiCategory

UPLOAD_TAG = "upload"


class Mode(Enum):
    """Whether the surface shows the editable text or the rendered preview."""
    EDITING = auto()
    PREVIEWING = auto()


class PanelKind(Enum):
    """Auxiliary panel shown below the toolbar."""
    NONE = auto()
    EXTEND_INPUT = auto()   # Value input for a tag (url, img, ... upload)
    EMOJI = auto()


@dataclass(frozen=True)
class Panel:
    """The single auxiliary panel currently open.

    Only one panel exists at a time, so extended input and the emoji
    picker can never both be visible.

    Attributes:
        kind: Which panel is open
        tag_name: Tag awaiting a value (EXTEND_INPUT only)
    """
    kind: PanelKind = PanelKind.NONE
    tag_name: str = ""

    @classmethod
    def none(cls) -> Panel:
        return cls()

    @classmethod
    def extend(cls, tag_name: str) -> Panel:
        """Value input for tag_name."""
        return cls(PanelKind.EXTEND_INPUT, tag_name)

    @classmethod
    def emoji(cls) -> Panel:
        return cls(PanelKind.EMOJI)

    @property
    def is_open(self) -> bool:
        return self.kind != PanelKind.NONE

    def is_extend(self, tag_name: str | None = None) -> bool:
        """Check for an extend-input panel, optionally for a specific tag."""
        if self.kind != PanelKind.EXTEND_INPUT:
            return False
        return tag_name is None or self.tag_name == tag_name

    @property
    def is_upload(self) -> bool:
        return self.is_extend(UPLOAD_TAG)


class ModeStateMachine:
    """Tracks the open panel, the typed extend value and the preview mode.

    Example:
        modes = ModeStateMachine()
        modes.press_extend("url")     # Panel.extend("url")
        modes.toggle_emoji()          # Panel.emoji(), url input closed
        modes.dismiss()               # Panel.none()
    """

    def __init__(self) -> None:
        self._panel = Panel.none()
        self._mode = Mode.EDITING
        self._extend_value = ""
        self._emoji_category = DEFAULT_CATEGORY

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def panel(self) -> Panel:
        return self._panel

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def previewing(self) -> bool:
        return self._mode == Mode.PREVIEWING

    @property
    def extend_value(self) -> str:
        """Value typed into the extend input so far."""
        return self._extend_value

    @property
    def emoji_category(self) -> EmojiCategory:
        return self._emoji_category

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def press_extend(self, tag_name: str) -> Panel:
        """Toggle the value input for a tag."""
        if self._panel.is_extend(tag_name):
            self._open(Panel.none())
        else:
            self._open(Panel.extend(tag_name))
        return self._panel

    def toggle_emoji(self) -> Panel:
        """Toggle the emoji picker."""
        if self._panel.kind == PanelKind.EMOJI:
            self._open(Panel.none())
        else:
            self._open(Panel.emoji())
        return self._panel

    def open_upload(self) -> Panel:
        """Open the file upload input."""
        self._open(Panel.extend(UPLOAD_TAG))
        return self._panel

    def dismiss(self) -> Panel:
        """Close whatever panel is open (click outside the editor)."""
        self._open(Panel.none())
        return self._panel

    def focus_surface(self) -> Panel:
        """The text surface gained focus; typing closes open panels."""
        return self.dismiss()

    def toggle_preview(self) -> Mode:
        """Flip between editing and previewing, leaving panels alone."""
        if self._mode == Mode.EDITING:
            self._mode = Mode.PREVIEWING
        else:
            self._mode = Mode.EDITING
        return self._mode

    def set_extend_value(self, value: str) -> None:
        self._extend_value = value

    def set_emoji_category(self, category: EmojiCategory) -> None:
        self._emoji_category = category

    def _open(self, panel: Panel) -> None:
        if panel != self._panel:
            self._extend_value = ""
        self._panel = panel

    def __repr__(self) -> str:
        return f"ModeStateMachine(mode={self._mode.name}, panel={self._panel})"
