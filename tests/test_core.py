"""Tests for core editing primitives (no editor instance needed)."""

import pytest

from ubb_editor.core.emoji import EmojiCategory, fragment, fragments
from ubb_editor.core.history import HistoryStack
from ubb_editor.core.insertion import insert_fragment, insert_tag, wrap
from ubb_editor.core.selection import Selection, SelectionTracker
from ubb_editor.core.tags import COLOR_PALETTE, TagPolicy, TagRegistry, TagSpec


class TestTagRegistry:
    """Tests for tag classification and the allow-list."""

    def test_policies(self) -> None:
        registry = TagRegistry()
        assert registry.get("b").policy == TagPolicy.PLAIN
        assert registry.get("url").policy == TagPolicy.DEFAULT_SELECTION
        for name in ("img", "video", "audio", "upload"):
            assert registry.get(name).policy == TagPolicy.REPLACE_SELECTION

    def test_only_img_skips_reselect(self) -> None:
        registry = TagRegistry()
        assert registry.get("img").reselect is False
        assert registry.get("video").reselect is True
        assert registry.get("b").reselect is True

    def test_needs_value(self) -> None:
        registry = TagRegistry()
        assert registry.needs_value("url") is True
        assert registry.needs_value("img") is True
        assert registry.needs_value("b") is False
        assert registry.needs_value("upload") is False

    def test_unknown_tag_is_plain(self) -> None:
        spec = TagRegistry().get("quote")
        assert spec == TagSpec("quote")
        assert "quote" not in TagRegistry()

    def test_allow_list(self) -> None:
        registry = TagRegistry(allowed=["b", "url"])
        assert registry.is_allowed("b") is True
        assert registry.is_allowed("img") is False
        assert registry.names() == ["b", "url"]
        assert len(registry) == 2

    def test_invalid_allowed_string(self) -> None:
        with pytest.raises(ValueError):
            TagRegistry(allowed="some")

    def test_palette_shape(self) -> None:
        assert len(COLOR_PALETTE) == 8
        assert all(len(row) == 8 for row in COLOR_PALETTE)


class TestSelection:
    """Tests for Selection clamping and the tracker."""

    def test_clamp_in_bounds(self) -> None:
        assert Selection(2, 4).clamp(10) == Selection(2, 4)

    def test_clamp_past_end(self) -> None:
        assert Selection(8, 20).clamp(5) == Selection(5, 5)

    def test_clamp_negative_and_reversed(self) -> None:
        assert Selection(-3, 2).clamp(5) == Selection(0, 2)
        assert Selection(4, 1).clamp(5) == Selection(1, 4)

    def test_split(self) -> None:
        assert Selection(0, 5).split("hello world") == ("", "hello", " world")

    def test_caret(self) -> None:
        caret = Selection.caret(3)
        assert caret.is_collapsed
        assert len(caret) == 0

    def test_tracker_stores_blur_offsets_unvalidated(self) -> None:
        tracker = SelectionTracker()
        tracker.on_blur(3, 40)
        assert tracker.selection == Selection(3, 40)
        assert tracker.resolve("short") == Selection(3, 5)


class TestHistoryStack:
    """Tests for undo/redo bookkeeping."""

    def test_record_notifies(self) -> None:
        seen: list[str] = []
        history = HistoryStack("", on_change=seen.append)
        history.record("A")
        assert seen == ["A"]
        assert history.past == ("", "A")

    def test_undo_redo_sequence(self) -> None:
        history = HistoryStack("")
        for value in ("A", "B", "C"):
            history.record(value)
        assert history.undo() == "B"
        assert history.undo() == "A"
        assert history.redo() == "B"
        assert history.future == ("C",)
        history.record("D")
        assert history.future == ()
        assert history.redo() is None

    def test_undo_restores_exact_value(self) -> None:
        history = HistoryStack("start")
        history.record("start + more")
        assert history.undo() == "start"
        assert history.redo() == "start + more"

    def test_undo_at_floor_returns_blank(self) -> None:
        seen: list[str] = []
        history = HistoryStack("initial", on_change=seen.append)
        assert history.undo() == ""
        assert seen == [""]
        assert len(history) == 1
        assert history.current == "initial"
        assert history.can_undo is False

    def test_redo_empty_is_silent(self) -> None:
        seen: list[str] = []
        history = HistoryStack("", on_change=seen.append)
        assert history.redo() is None
        assert seen == []

    def test_reconcile(self) -> None:
        seen: list[str] = []
        history = HistoryStack("", on_change=seen.append)
        history.record("A")
        history.undo()
        assert history.can_redo
        assert history.reconcile("") is False
        assert history.reconcile("reset") is True
        assert history.current == "reset"
        assert history.can_redo is False
        assert seen == ["A", ""]


class TestInsertion:
    """Tests for tag and fragment insertion."""

    registry = TagRegistry()

    def test_plain_tag_wraps_selection(self) -> None:
        result = insert_tag("hello world", Selection(0, 5), self.registry.get("b"))
        assert result.value == "[b]hello[/b] world"
        assert result.selection == Selection(0, 12)

    def test_plain_tag_with_value(self) -> None:
        result = insert_tag("abc", Selection(1, 2), self.registry.get("align"), "center")
        assert result.value == "a[align=center]b[/align]c"
        assert result.selection == Selection(1, 24)

    def test_plain_tag_empty_selection_and_value(self) -> None:
        result = insert_tag("xy", Selection(1, 1), self.registry.get("b"))
        assert result.value == "x[b][/b]y"
        assert result.selection == Selection(1, 8)

    def test_url_without_selection_repeats_value(self) -> None:
        result = insert_tag("", Selection(0, 0), self.registry.get("url"), "http://x")
        assert result.value == "[url=http://x]http://x[/url]"

    def test_url_with_selection_keeps_text(self) -> None:
        result = insert_tag("see here", Selection(4, 8), self.registry.get("url"), "http://x")
        assert result.value == "see [url=http://x]here[/url]"

    def test_url_empty_everything(self) -> None:
        result = insert_tag("", Selection(0, 0), self.registry.get("url"))
        assert result.value == "[url][/url]"

    def test_replace_selection_discards_nested_markup(self) -> None:
        text = "a[b]bold[/b]z"
        result = insert_tag(text, Selection(1, 12), self.registry.get("video"), "v.mp4")
        assert result.value == "a[video]v.mp4[/video]z"
        assert result.selection == Selection(1, 21)

    def test_img_collapses_caret(self) -> None:
        result = insert_tag("ab", Selection(1, 1), self.registry.get("img"), "p.png")
        assert result.value == "a[img]p.png[/img]b"
        assert result.selection == Selection.caret(17)

    def test_selection_at_end_of_text(self) -> None:
        result = insert_tag("abc", Selection(3, 3), self.registry.get("i"))
        assert result.value == "abc[i][/i]"

    def test_out_of_range_selection_is_clamped(self) -> None:
        result = insert_tag("abc", Selection(10, 50), self.registry.get("u"))
        assert result.value == "abc[u][/u]"
        assert result.selection == Selection(3, 10)

    @pytest.mark.parametrize("name", ["b", "url", "img", "upload", "color"])
    def test_never_shorter_than_surrounding_text(self, name: str) -> None:
        text = "0123456789"
        for start in range(len(text) + 1):
            for end in range(start, len(text) + 1):
                result = insert_tag(text, Selection(start, end), self.registry.get(name))
                assert len(result.value) >= start + (len(text) - end) + 2

    def test_wrap_policies(self) -> None:
        assert wrap(TagSpec("size"), "x", "3") == "[size=3]x[/size]"
        assert wrap(TagSpec("audio", TagPolicy.REPLACE_SELECTION), "x", "a.mp3") == "[audio]a.mp3[/audio]"

    def test_fragment_replaces_selection(self) -> None:
        result = insert_fragment("hello world", Selection(0, 5), "[ac01]")
        assert result.value == "[ac01] world"
        assert result.selection == Selection.caret(6)


class TestEmoji:
    """Tests for the emoji catalog."""

    def test_fragment_format(self) -> None:
        assert fragment(EmojiCategory.AC, 1) == "[ac01]"
        assert fragment(EmojiCategory.EM, 0) == "[em00]"
        assert fragment(EmojiCategory.TB, 12) == "[tb12]"

    def test_fragment_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            fragment(EmojiCategory.AC, 0)

    def test_fragments_count(self) -> None:
        listed = fragments(EmojiCategory.MJ)
        assert len(listed) == EmojiCategory.MJ.value.count
        assert listed[0] == "[mj01]"

    def test_from_prefix(self) -> None:
        assert EmojiCategory.from_prefix("TB") is EmojiCategory.TB
        with pytest.raises(ValueError):
            EmojiCategory.from_prefix("xx")
