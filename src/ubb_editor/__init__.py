"""
ubb-editor: headless editing engine for UBB forum markup

Track a selection, wrap it in tags, undo and redo, and coordinate uploads
for a text box whose value is owned elsewhere.

Quick Start:
    >>> import ubb_editor as ubb
    >>> editor = ubb.UbbEditor("hello world", update=print)
    >>> editor.blur(0, 5)
    >>> editor.insert_tag("b")
    [b]hello[/b] world
    True
    >>> ubb.wrap("see here", "url", "http://x", start=4, end=8)
    'see [url=http://x]here[/url]'

Features:
    - Plain, replace-selection and default-selection tag policies
    - Undo/redo history reconciled with out-of-band value changes
    - Mutually exclusive value-input and emoji panels, preview mode
    - Upload validation and serialization over a pluggable uploader
    - Ctrl+Z / Ctrl+Y / Ctrl+Enter shortcuts
"""

__version__ = "0.1.0"

# Core types
from ubb_editor.core.tags import TagPolicy, TagSpec, TagRegistry
from ubb_editor.core.selection import Selection
from ubb_editor.core.history import HistoryStack
from ubb_editor.core.insertion import insert_tag
from ubb_editor.core.emoji import EmojiCategory

# Editor
from ubb_editor.edit.editor import UbbEditor
from ubb_editor.edit.options import EditorOptions
from ubb_editor.edit.panels import Mode, Panel
from ubb_editor.edit.upload import LocalUploader, UploadError, UploadFile, Uploader


def wrap(text: str, tag: str, value: str = "", start: int = 0, end: int | None = None) -> str:
    """Apply one tag to a range of text using the default tag registry."""
    selection = Selection(start, len(text) if end is None else end)
    return insert_tag(text, selection, TagRegistry().get(tag), value).value


__all__ = [
    # Version
    "__version__",
    # Core types
    "TagPolicy",
    "TagSpec",
    "TagRegistry",
    "Selection",
    "HistoryStack",
    "EmojiCategory",
    # Editor
    "UbbEditor",
    "EditorOptions",
    "Mode",
    "Panel",
    # Uploads
    "LocalUploader",
    "UploadError",
    "UploadFile",
    "Uploader",
    # Convenience
    "wrap",
]
