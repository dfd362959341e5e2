"""Core editing primitives: tags, selection, history and insertion."""

from ubb_editor.core.tags import TagPolicy, TagSpec, TagRegistry
from ubb_editor.core.selection import Selection, SelectionTracker
from ubb_editor.core.history import HistoryStack
from ubb_editor.core.insertion import Insertion, insert_tag, insert_fragment
from ubb_editor.core.emoji import EmojiCategory

__all__ = [
    "TagPolicy",
    "TagSpec",
    "TagRegistry",
    "Selection",
    "SelectionTracker",
    "HistoryStack",
    "Insertion",
    "insert_tag",
    "insert_fragment",
    "EmojiCategory",
]
