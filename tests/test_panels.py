"""Tests for the mode state machine and keyboard shortcuts."""

from ubb_editor.core.emoji import EmojiCategory
from ubb_editor.edit.keys import EDITOR_SHORTCUTS, Key, KeyEvent, help_lines, match_shortcut
from ubb_editor.edit.panels import Mode, ModeStateMachine, Panel, PanelKind


class TestModeStateMachine:
    """Tests for panel exclusivity and mode toggling."""

    def test_initial_state(self) -> None:
        modes = ModeStateMachine()
        assert modes.mode == Mode.EDITING
        assert modes.panel == Panel.none()
        assert modes.emoji_category == EmojiCategory.AC

    def test_extend_toggles(self) -> None:
        modes = ModeStateMachine()
        assert modes.press_extend("url") == Panel.extend("url")
        assert modes.press_extend("url") == Panel.none()

    def test_extend_switches_tag(self) -> None:
        modes = ModeStateMachine()
        modes.press_extend("url")
        modes.set_extend_value("http://x")
        assert modes.press_extend("img") == Panel.extend("img")
        assert modes.extend_value == ""

    def test_emoji_and_extend_are_exclusive(self) -> None:
        modes = ModeStateMachine()
        modes.press_extend("url")
        assert modes.toggle_emoji().kind == PanelKind.EMOJI
        assert not modes.panel.is_extend()
        modes.press_extend("video")
        assert modes.panel.kind == PanelKind.EXTEND_INPUT
        assert modes.toggle_emoji() == Panel.emoji()
        assert modes.toggle_emoji() == Panel.none()

    def test_open_upload(self) -> None:
        modes = ModeStateMachine()
        modes.toggle_emoji()
        panel = modes.open_upload()
        assert panel.is_upload
        assert panel.is_extend("upload")
        assert modes.open_upload().is_upload

    def test_dismiss_and_focus_close_everything(self) -> None:
        modes = ModeStateMachine()
        modes.toggle_emoji()
        assert modes.dismiss() == Panel.none()
        modes.press_extend("url")
        modes.set_extend_value("http://x")
        assert modes.focus_surface() == Panel.none()
        assert modes.extend_value == ""

    def test_preview_keeps_panel(self) -> None:
        modes = ModeStateMachine()
        modes.press_extend("url")
        assert modes.toggle_preview() == Mode.PREVIEWING
        assert modes.previewing
        assert modes.panel == Panel.extend("url")
        assert modes.toggle_preview() == Mode.EDITING

    def test_emoji_category(self) -> None:
        modes = ModeStateMachine()
        modes.set_emoji_category(EmojiCategory.TB)
        assert modes.emoji_category == EmojiCategory.TB


class TestShortcuts:
    """Tests for shortcut matching."""

    def test_ctrl_z_is_undo(self) -> None:
        shortcut = match_shortcut(KeyEvent.ctrl_char("z"))
        assert shortcut is not None
        assert shortcut.handler == "undo"

    def test_ctrl_y_is_redo(self) -> None:
        shortcut = match_shortcut(KeyEvent.ctrl_char("y"))
        assert shortcut is not None
        assert shortcut.handler == "redo"

    def test_ctrl_enter_is_submit(self) -> None:
        shortcut = match_shortcut(KeyEvent(key=Key.ENTER, ctrl=True))
        assert shortcut is not None
        assert shortcut.handler == "submit"

    def test_without_ctrl_nothing_matches(self) -> None:
        assert match_shortcut(KeyEvent(char="z")) is None
        assert match_shortcut(KeyEvent(key=Key.ENTER)) is None

    def test_shifted_letters_do_not_match(self) -> None:
        assert match_shortcut(KeyEvent(char="Z", ctrl=True, shift=True)) is None
        assert match_shortcut(KeyEvent(char="Y", ctrl=True, shift=True)) is None

    def test_help_lines(self) -> None:
        lines = help_lines()
        assert len(lines) == len(EDITOR_SHORTCUTS)
        assert "Ctrl+Z" in lines[0]
        assert "Ctrl+Enter" in lines[2]
