"""HistoryStack - undo/redo bookkeeping for the edited value."""

from __future__ import annotations

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class HistoryStack:
    """Past and redo snapshots of the edited text.

    The past list always holds at least one entry: the value the editor
    started with. Every committed value is appended to it and clears
    the redo list. Undo and redo move snapshots between the two lists.

    Attributes:
        _past: Committed values, oldest first
        _future: Undone values, the most recently undone last
        _on_change: Callback notified with every value the history
            hands back to the owner

    Example:
        history = HistoryStack("", on_change=print)
        history.record("A")
        history.record("B")
        history.undo()   # prints and returns "A"
        history.redo()   # prints and returns "B"
    """

    def __init__(
        self,
        initial: str = "",
        on_change: Callable[[str], None] | None = None,
    ) -> None:
        self._past: list[str] = [initial]
        self._future: list[str] = []
        self._on_change = on_change

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def current(self) -> str:
        """Top of the past list."""
        return self._past[-1]

    @property
    def past(self) -> tuple[str, ...]:
        """Committed values, oldest first."""
        return tuple(self._past)

    @property
    def future(self) -> tuple[str, ...]:
        """Undone values, the next one to redo first."""
        return tuple(reversed(self._future))

    @property
    def can_undo(self) -> bool:
        return len(self._past) > 1

    @property
    def can_redo(self) -> bool:
        return bool(self._future)

    def on_change(self, callback: Callable[[str], None] | None) -> None:
        """Register the owner callback."""
        self._on_change = callback

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def record(self, value: str) -> str:
        """Commit a new value, dropping anything that could be redone."""
        self._past.append(value)
        self._future.clear()
        self._notify(value)
        return value

    def undo(self) -> str:
        """Step back one value.

        At the floor the history is left as it is and the empty value is
        handed back, which resets the editor to blank.

        Returns:
            The value that is now current
        """
        if len(self._past) == 1:
            self._notify("")
            return ""
        self._future.append(self._past.pop())
        value = self._past[-1]
        self._notify(value)
        return value

    def redo(self) -> Optional[str]:
        """Re-apply the most recently undone value, if there is one."""
        if not self._future:
            return None
        value = self._future.pop()
        self._past.append(value)
        self._notify(value)
        return value

    def reconcile(self, value: str) -> bool:
        """Adopt a value that changed outside the editor.

        Returns:
            True if the value differed from the top of history and was pushed
        """
        if self._past[-1] == value:
            return False
        logger.debug("reconciling external value (%d chars)", len(value))
        self._past.append(value)
        self._future.clear()
        return True

    def _notify(self, value: str) -> None:
        if self._on_change is not None:
            self._on_change(value)

    def __len__(self) -> int:
        return len(self._past)

    def __repr__(self) -> str:
        return f"HistoryStack(past={len(self._past)}, future={len(self._future)})"
