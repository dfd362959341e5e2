"""Tag insertion - wrap or replace the selected span with UBB markup.

The functions here are pure: they take the current text and selection
and return the text and selection to apply, leaving history and focus
handling to the editor.

Example:
    from ubb_editor.core.insertion import insert_tag
    from ubb_editor.core.selection import Selection
    from ubb_editor.core.tags import TagSpec

    result = insert_tag("hello world", Selection(0, 5), TagSpec("b"))
    result.value      # "[b]hello[/b] world"
    result.selection  # Selection(start=0, end=12)
"""

from __future__ import annotations

from dataclasses import dataclass

from ubb_editor.core.selection import Selection
from ubb_editor.core.tags import TagPolicy, TagSpec


@dataclass(frozen=True)
class Insertion:
    """Result of an insertion: the new text and where to put the selection."""
    value: str
    selection: Selection


def open_tag(name: str, value: str = "") -> str:
    """Opening marker, with an attribute only when value is non-empty."""
    if value:
        return f"[{name}={value}]"
    return f"[{name}]"


def close_tag(name: str) -> str:
    return f"[/{name}]"


def wrap(spec: TagSpec, selected: str, value: str = "") -> str:
    """Build the markup span that replaces the selection.

    Args:
        spec: Tag definition deciding the wrapping policy
        selected: Currently selected text (may be empty)
        value: Auxiliary value such as a link target (may be empty)

    Returns:
        The wrapped span
    """
    name = spec.name
    if spec.policy == TagPolicy.REPLACE_SELECTION:
        return f"[{name}]{value}{close_tag(name)}"
    if spec.policy == TagPolicy.DEFAULT_SELECTION:
        return f"{open_tag(name, value)}{selected or value}{close_tag(name)}"
    return f"{open_tag(name, value)}{selected}{close_tag(name)}"


def insert_tag(text: str, selection: Selection, spec: TagSpec, value: str = "") -> Insertion:
    """Insert a tag around (or in place of) the selection.

    Args:
        text: Current editor value
        selection: Selection to act on, clamped to the text before use
        spec: Tag to insert
        value: Auxiliary tag value

    Returns:
        Insertion with the new value and the selection to restore
    """
    before, selected, after = selection.split(text)
    wrapped = wrap(spec, selected, value)
    end = len(before) + len(wrapped)
    if spec.reselect:
        new_selection = Selection(len(before), end)
    else:
        new_selection = Selection.caret(end)
    return Insertion(before + wrapped + after, new_selection)


def insert_fragment(text: str, selection: Selection, fragment: str) -> Insertion:
    """Replace the selection with a literal fragment and place the caret after it."""
    before, _, after = selection.split(text)
    return Insertion(before + fragment + after, Selection.caret(len(before) + len(fragment)))
