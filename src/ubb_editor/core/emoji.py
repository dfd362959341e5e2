"""Emoji catalog - the emoticon sets offered by the emoji panel."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class EmojiSet:
    """Numbering of one emoticon set.

    Attributes:
        prefix: Code prefix written inside the brackets (e.g. "ac")
        first: Number of the first emoticon
        count: Number of emoticons in the set
        label: Display name
    """
    prefix: str
    first: int
    count: int
    label: str


class EmojiCategory(Enum):
    """Emoticon sets, keyed by the prefix used in markup."""
    EM = EmojiSet("em", 0, 92, "Classic")
    AC = EmojiSet("ac", 1, 54, "AC")
    MJ = EmojiSet("mj", 1, 36, "Mahjong")
    TB = EmojiSet("tb", 1, 33, "Tieba")

    @classmethod
    def from_prefix(cls, prefix: str) -> "EmojiCategory":
        """Look up a category by its markup prefix."""
        for category in cls:
            if category.value.prefix == prefix.lower():
                return category
        raise ValueError(f"Unknown emoji category: {prefix!r}")


DEFAULT_CATEGORY = EmojiCategory.AC


def fragment(category: EmojiCategory, number: int) -> str:
    """Markup fragment for one emoticon, e.g. ``[ac01]``.

    Raises:
        ValueError: If number is outside the set
    """
    emoji_set = category.value
    if not emoji_set.first <= number < emoji_set.first + emoji_set.count:
        raise ValueError(
            f"{emoji_set.prefix} emoticons run from {emoji_set.first} "
            f"to {emoji_set.first + emoji_set.count - 1}, got {number}"
        )
    return f"[{emoji_set.prefix}{number:02d}]"


def fragments(category: EmojiCategory) -> list[str]:
    """All fragments of a category in display order."""
    emoji_set = category.value
    return [fragment(category, n) for n in range(emoji_set.first, emoji_set.first + emoji_set.count)]
