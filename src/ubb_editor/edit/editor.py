"""UbbEditor - the editing engine behind a UBB markup text box.

The editor mirrors a value owned by someone else (a form, a draft store).
Every committed change is pushed to the owner through the ``update``
callback; changes the owner makes on its own are fed back with ``sync``.
The surface that displays the text reports focus, blur offsets and key
presses, and after each render asks ``after_render`` whether it should
take focus and re-apply a selection.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from ubb_editor.core.emoji import EmojiCategory, fragment
from ubb_editor.core.history import HistoryStack
from ubb_editor.core.insertion import Insertion, insert_fragment, insert_tag
from ubb_editor.core.selection import Selection, SelectionTracker
from ubb_editor.core.tags import ALIGNMENTS, SIZE_CHOICES, TagRegistry
from ubb_editor.edit.keys import KeyEvent, match_shortcut
from ubb_editor.edit.messages import MessageArea
from ubb_editor.edit.options import EditorOptions
from ubb_editor.edit.panels import Mode, ModeStateMachine, Panel
from ubb_editor.edit.upload import IMAGE_TAG, UploadCoordinator, Uploader, UploadFile

logger = logging.getLogger(__name__)

MSG_UPLOAD_UNAVAILABLE = "Upload unavailable"


class UbbEditor:
    """Headless UBB editor.

    Attributes:
        _history: Committed values with undo/redo
        _tracker: Last known selection of the surface
        _modes: Open panel and edit/preview mode
        _messages: Transient message area
        _uploads: Upload coordinator (None without an uploader)
        _restore_pending: Whether the next render should focus the surface
            and re-apply the tracked selection

    Example:
        values = []
        editor = UbbEditor("hello world", update=values.append)
        editor.blur(0, 5)
        editor.insert_tag("b")
        editor.value          # "[b]hello[/b] world"
        editor.after_render() # Selection(start=0, end=12)
        editor.undo()         # "hello world"
    """

    def __init__(
        self,
        value: str = "",
        update: Callable[[str], None] | None = None,
        options: EditorOptions | None = None,
        uploader: Uploader | None = None,
        registry: TagRegistry | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._options = options or EditorOptions()
        self._registry = registry or TagRegistry(allowed=self._options.allowed_tags)
        self._update = update
        self._value = value
        self._history = HistoryStack(value, on_change=self._on_history_change)
        self._tracker = SelectionTracker()
        self._modes = ModeStateMachine()
        self._messages = MessageArea(self._options.message_timeout, clock)
        self._uploads: UploadCoordinator | None = None
        if uploader is not None:
            self._uploads = UploadCoordinator(uploader, self._messages, self._options.max_upload_size)
        self._restore_pending = False
        self._focused = False

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def value(self) -> str:
        """Current text."""
        return self._value

    @property
    def selection(self) -> Selection:
        """Tracked selection, clamped to the current text."""
        return self._tracker.resolve(self._value)

    @property
    def history(self) -> HistoryStack:
        return self._history

    @property
    def registry(self) -> TagRegistry:
        return self._registry

    @property
    def options(self) -> EditorOptions:
        return self._options

    @property
    def panel(self) -> Panel:
        return self._modes.panel

    @property
    def mode(self) -> Mode:
        return self._modes.mode

    @property
    def previewing(self) -> bool:
        return self._modes.previewing

    @property
    def extend_value(self) -> str:
        return self._modes.extend_value

    @property
    def emoji_category(self) -> EmojiCategory:
        return self._modes.emoji_category

    @property
    def message(self) -> str:
        """Transient message, "" once it has expired."""
        return self._messages.text

    @property
    def focused(self) -> bool:
        return self._focused

    @property
    def upload_pending(self) -> bool:
        """Whether the upload control should be disabled."""
        return self._uploads is not None and self._uploads.pending

    # -------------------------------------------------------------------------
    # Owner and surface events
    # -------------------------------------------------------------------------

    def sync(self, value: str) -> bool:
        """Take in the owner's value after it changed.

        Returns:
            True if the value was new to the editor and entered history
        """
        if self._history.reconcile(value):
            self._value = value
            return True
        return False

    def change(self, value: str) -> None:
        """The user typed; commit the surface's new text."""
        self._history.record(value)

    def focus(self) -> None:
        """The surface gained focus, closing any open panel."""
        self._focused = True
        self._modes.focus_surface()

    def blur(self, start: int, end: int) -> None:
        """The surface lost focus with the given selection."""
        self._focused = False
        self._tracker.on_blur(start, end)

    def outside_click(self) -> None:
        """A click landed outside the editor."""
        self._modes.dismiss()

    def after_render(self) -> Optional[Selection]:
        """Selection to re-apply after rendering, if an edit asked for one.

        The surface takes focus when a selection is returned. While
        previewing the request is held until editing resumes.
        """
        if not self._restore_pending or self._modes.previewing:
            return None
        self._restore_pending = False
        self.focus()
        return self.selection

    def handle_key(self, event: KeyEvent) -> bool:
        """Handle a key press on the surface.

        Returns:
            True if the event was consumed and its default action
            should be suppressed
        """
        if not self._focused or self._modes.previewing:
            return False
        shortcut = match_shortcut(event)
        if shortcut is None:
            return False
        getattr(self, shortcut.handler)()
        return True

    # -------------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------------

    def insert_tag(self, name: str, value: str = "") -> bool:
        """Wrap the selection with a tag, or replace it for media tags.

        Returns:
            False if the tag is not allowed in this editor
        """
        if not self._registry.is_allowed(name):
            return self._refuse(f"[{name}] is not allowed here")
        spec = self._registry.get(name)
        self._commit(insert_tag(self._value, self._tracker.selection, spec, value))
        return True

    def insert_emoji(self, markup: str) -> None:
        """Replace the selection with an emoji fragment."""
        self._commit(insert_fragment(self._value, self._tracker.selection, markup))

    def pick_emoji(self, number: int, category: EmojiCategory | None = None) -> bool:
        """Insert an emoticon from the catalog (the panel's category by default).

        Returns:
            False if the number is outside the set; a message is shown instead
        """
        try:
            markup = fragment(category or self._modes.emoji_category, number)
        except ValueError as e:
            return self._refuse(str(e))
        self.insert_emoji(markup)
        return True

    def choose_color(self, color: str) -> bool:
        """Color picker callback: color the selection."""
        return self.insert_tag("color", color)

    def choose_size(self, size: int) -> bool:
        if size not in SIZE_CHOICES:
            return self._refuse(f"Size must be one of {', '.join(map(str, SIZE_CHOICES))}")
        self._modes.dismiss()
        return self.insert_tag("size", str(size))

    def align(self, alignment: str) -> bool:
        if alignment not in ALIGNMENTS:
            return self._refuse(f"Alignment must be one of {', '.join(ALIGNMENTS)}")
        return self.insert_tag("align", alignment)

    def undo(self) -> str:
        return self._history.undo()

    def redo(self) -> Optional[str]:
        return self._history.redo()

    def submit(self) -> bool:
        """Call the configured submit callback, if there is one."""
        if self._options.submit is None:
            return False
        self._options.submit()
        return True

    def _refuse(self, message: str) -> bool:
        logger.debug("refused: %s", message)
        self._messages.show(message)
        return False

    def _commit(self, result: Insertion) -> None:
        self._tracker.set(result.selection)
        self._history.record(result.value)
        self._restore_pending = True

    def _on_history_change(self, value: str) -> None:
        self._value = value
        if self._update is not None:
            self._update(value)

    # -------------------------------------------------------------------------
    # Panels
    # -------------------------------------------------------------------------

    def press_tag(self, name: str) -> None:
        """Toolbar button: open the value input, or insert right away."""
        if self._registry.needs_value(name):
            self._modes.press_extend(name)
        else:
            self.insert_tag(name)

    def toggle_emoji(self) -> None:
        self._modes.toggle_emoji()

    def set_emoji_category(self, category: EmojiCategory) -> None:
        self._modes.set_emoji_category(category)

    def open_upload(self) -> None:
        self._modes.open_upload()

    def set_extend_value(self, value: str) -> None:
        self._modes.set_extend_value(value)

    def commit_extend(self) -> bool:
        """Insert the open panel's tag with the typed value and close it."""
        panel = self._modes.panel
        if not panel.is_extend() or panel.is_upload:
            return False
        inserted = self.insert_tag(panel.tag_name, self._modes.extend_value)
        self._modes.dismiss()
        return inserted

    def cancel_extend(self) -> None:
        """Close the value input and return focus to the surface."""
        self._modes.dismiss()
        self._restore_pending = True

    def toggle_preview(self) -> Mode:
        mode = self._modes.toggle_preview()
        self._restore_pending = True
        return mode

    # -------------------------------------------------------------------------
    # Uploads
    # -------------------------------------------------------------------------

    async def handle_upload(self, file: UploadFile) -> bool:
        """Upload a file picked in the upload (or image) panel and insert it.

        Returns:
            True if the reference was inserted
        """
        panel = self._modes.panel
        if not (panel.is_upload or panel.is_extend(IMAGE_TAG)):
            logger.debug("ignoring upload of %s with panel %s", file.name, panel)
            return False
        if self._uploads is None:
            logger.warning("no uploader configured, cannot upload %s", file.name)
            self._messages.show(MSG_UPLOAD_UNAVAILABLE)
            return False

        tag_name = panel.tag_name
        reference = await self._uploads.handle(file, tag_name)
        if reference is None:
            return False
        return self.insert_tag(tag_name, reference)

    def cancel_upload(self) -> bool:
        """Discard the result of the outstanding upload."""
        return self._uploads is not None and self._uploads.cancel()

    def __repr__(self) -> str:
        return (
            f"UbbEditor("
            f"length={len(self._value)}, "
            f"selection={self.selection}, "
            f"mode={self.mode.name}, "
            f"panel={self.panel.kind.name})"
        )
