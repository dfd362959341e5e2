"""Transient message area shown above the toolbar."""

from __future__ import annotations

import time
from typing import Callable

# Seconds a message stays visible
MESSAGE_TIMEOUT = 2.5


class MessageArea:
    """A single user-facing message that expires on its own.

    The message is kept with the time it was shown and reads back as
    empty once the timeout has passed, so nothing has to schedule the
    clearing.

    Example:
        messages = MessageArea()
        messages.show("File too large")
        messages.text   # "File too large", "" after 2.5 seconds
    """

    def __init__(
        self,
        timeout: float = MESSAGE_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._timeout = timeout
        self._clock = clock
        self._text = ""
        self._shown_at = 0.0

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def text(self) -> str:
        """Current message, or "" if none is showing."""
        if self._text and self._clock() - self._shown_at >= self._timeout:
            self._text = ""
        return self._text

    @property
    def visible(self) -> bool:
        return bool(self.text)

    def show(self, text: str) -> None:
        """Show a message, replacing any current one."""
        self._text = text
        self._shown_at = self._clock()

    def clear(self) -> None:
        self._text = ""

    def __repr__(self) -> str:
        return f"MessageArea(text={self.text!r})"
